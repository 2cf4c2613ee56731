"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from study.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from study.domain.error import DomainError
from study.interface.api.auth import CurrentUserId
from study.interface.error import to_http_error

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current user's profile."""

    username: str = Field(min_length=1, max_length=50)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    user_id: CurrentUserId,
) -> ProfileResponse:
    """Get the authenticated user's profile.

    Raises:
        HTTPException: 404 until the user saves a profile
    """
    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Get profile")


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    user_id: CurrentUserId,
) -> ProfileResponse:
    """Set the authenticated user's username and avatar."""
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user_id,
                username=request.username,
                avatar_url=request.avatar_url,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Update profile")
