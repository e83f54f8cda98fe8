"""Direct message endpoints for the LearnHub API."""

from __future__ import annotations

from fastapi import APIRouter, status

from learnhub.api.v1.dependencies import ConversationServiceDep, CurrentUserDep
from learnhub.schemas.chat import DirectMessageCreate, MessageRead
from learnhub.services.errors import UserNotFoundError

from .chats import chat_error_to_http

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: DirectMessageCreate,
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
) -> MessageRead:
    """Send a direct message; the first message between two users opens their chat."""
    try:
        message = service.send_direct_message(
            current_user,
            message_data.recipient_id,
            message_data.body,
        )
    except (UserNotFoundError, ValueError) as exc:
        raise chat_error_to_http(exc) from exc
    return MessageRead.model_validate(message)
