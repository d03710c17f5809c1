"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from conduit.application.usecase.profile import (
    FollowUserRequest,
    FollowUserUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UnfollowUserRequest,
    UnfollowUserUseCase,
)
from conduit.interface.api.auth import session_token

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    use_case: FromDishka[GetProfileUseCase],
    token: str | None = Depends(session_token),
) -> ProfileResponse:
    """Get a user's profile. Authentication is optional."""
    return await use_case.execute(GetProfileRequest(username=username, token=token))


@router.post("/{username}/follow", response_model=ProfileResponse)
async def follow(
    username: str,
    use_case: FromDishka[FollowUserUseCase],
    token: str | None = Depends(session_token),
) -> ProfileResponse:
    """Follow a user."""
    return await use_case.execute(FollowUserRequest(username=username, token=token))


@router.delete("/{username}/follow", response_model=ProfileResponse)
async def unfollow(
    username: str,
    use_case: FromDishka[UnfollowUserUseCase],
    token: str | None = Depends(session_token),
) -> ProfileResponse:
    """Stop following a user."""
    return await use_case.execute(UnfollowUserRequest(username=username, token=token))
