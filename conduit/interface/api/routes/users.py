"""User account routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from conduit.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginUserRequest,
    LoginUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserResponse,
)
from conduit.interface.api.auth import session_token

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class NewUser(BaseModel):
    """Registration fields."""

    username: str = ""
    email: str = ""
    password: str = ""


class NewUserBody(BaseModel):
    """``{"user": {...}}`` body for registration."""

    user: NewUser


class LoginUser(BaseModel):
    """Login fields."""

    email: str = ""
    password: str = ""


class LoginUserBody(BaseModel):
    """``{"user": {...}}`` body for login."""

    user: LoginUser


class UpdateUser(BaseModel):
    """Updatable account fields; omitted fields are left unchanged."""

    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    password: Optional[str] = None


class UpdateUserBody(BaseModel):
    """``{"user": {...}}`` body for account updates."""

    user: UpdateUser


@router.post("/users", response_model=UserResponse)
async def register(
    body: NewUserBody,
    use_case: FromDishka[RegisterUserUseCase],
) -> UserResponse:
    """Register a new account and sign it in.

    Returns:
        The new user with a session token
    """
    return await use_case.execute(RegisterUserRequest(**body.user.model_dump()))


@router.post("/users/login", response_model=UserResponse)
async def login(
    body: LoginUserBody,
    use_case: FromDishka[LoginUserUseCase],
) -> UserResponse:
    """Sign in with email and password."""
    return await use_case.execute(LoginUserRequest(**body.user.model_dump()))


@router.get("/user", response_model=UserResponse)
async def current_user(
    use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(session_token),
) -> UserResponse:
    """Return the account the session token belongs to."""
    return await use_case.execute(GetCurrentUserRequest(token=token))


@router.put("/user", response_model=UserResponse)
async def update_user(
    body: UpdateUserBody,
    use_case: FromDishka[UpdateUserUseCase],
    token: str | None = Depends(session_token),
) -> UserResponse:
    """Update the signed-in account.

    Only the fields present in the body are changed.
    """
    return await use_case.execute(
        UpdateUserRequest(token=token, **body.user.model_dump(exclude_unset=True))
    )
