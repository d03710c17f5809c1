"""User account use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login_user import LoginUserRequest, LoginUserUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase, UserResponse
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginUserRequest",
    "LoginUserUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserResponse",
]
