"""Profile use cases."""

from .follow_user import FollowUserRequest, FollowUserUseCase
from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .unfollow_user import UnfollowUserRequest, UnfollowUserUseCase

__all__ = [
    "FollowUserRequest",
    "FollowUserUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UnfollowUserRequest",
    "UnfollowUserUseCase",
]
