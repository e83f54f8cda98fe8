"""User lookup endpoints used to pick chat recipients."""

from __future__ import annotations

from fastapi import APIRouter, Query

from learnhub.api.v1.dependencies import ConversationServiceDep, CurrentUserDep
from learnhub.schemas.user import UserSearchResponse, UserSummary

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search", response_model=UserSearchResponse)
async def search_users(
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
    username: str = Query("", max_length=100),
) -> UserSearchResponse:
    """Return users whose username contains the given fragment."""
    users = service.search_users(username)
    return UserSearchResponse(users=[UserSummary.model_validate(user) for user in users])
