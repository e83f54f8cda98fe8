"""Chat endpoints for the LearnHub API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from learnhub.api.v1.dependencies import ConversationServiceDep, CurrentUserDep
from learnhub.schemas.chat import (
    ChatRead,
    DirectChatCreate,
    MessageCreate,
    MessagePage,
    MessageRead,
)
from learnhub.services.errors import (
    ChatAccessForbiddenError,
    ChatNotFoundError,
    UserNotFoundError,
)

router = APIRouter(prefix="/chats", tags=["chats"])


def chat_error_to_http(exc: Exception) -> HTTPException:
    """Map conversation errors onto HTTP responses without leaking chat data."""
    if isinstance(exc, ChatAccessForbiddenError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    if isinstance(exc, ChatNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chat not found")
    if isinstance(exc, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipient not found")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/", response_model=list[ChatRead])
async def list_chats(
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
) -> list[ChatRead]:
    """List the chats the current user participates in."""
    chats = service.list_my_chats(current_user)
    return [
        ChatRead.from_chat(chat, is_public=service.access_guard.is_public(chat))
        for chat in chats
    ]


@router.post("/direct", response_model=ChatRead)
async def open_direct_chat(
    payload: DirectChatCreate,
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
) -> ChatRead:
    """Return the direct chat with another user, creating it on first use."""
    try:
        chat = service.open_direct_chat(current_user, payload.recipient_id)
    except (UserNotFoundError, ValueError) as exc:
        raise chat_error_to_http(exc) from exc
    return ChatRead.from_chat(chat, is_public=service.access_guard.is_public(chat))


@router.get("/{chat_id}/messages", response_model=MessagePage)
async def get_chat_messages(
    chat_id: int,
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
    page: int = Query(1, ge=1),
) -> MessagePage:
    """Return a page of the chat's messages, newest first."""
    try:
        messages = service.get_messages_page(current_user, chat_id, page)
    except (ChatNotFoundError, ChatAccessForbiddenError) as exc:
        raise chat_error_to_http(exc) from exc
    return MessagePage(
        chat_id=chat_id,
        page=page,
        page_size=service.page_size,
        messages=[MessageRead.model_validate(message) for message in messages],
    )


@router.post(
    "/{chat_id}/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
async def post_chat_message(
    chat_id: int,
    payload: MessageCreate,
    current_user: CurrentUserDep,
    service: ConversationServiceDep,
) -> MessageRead:
    """Post a message into a chat the current user can access."""
    try:
        message = service.post_message(current_user, chat_id, payload.body)
    except (ChatNotFoundError, ChatAccessForbiddenError, ValueError) as exc:
        raise chat_error_to_http(exc) from exc
    return MessageRead.model_validate(message)
