"""Chat and message Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from learnhub.db.time import as_utc
from learnhub.models import Chat

from .user import UserSummary

MAX_BODY_LENGTH = 4000


class DirectChatCreate(BaseModel):
    """Request to open (or fetch) the direct chat with another user."""

    recipient_id: int = Field(..., ge=1, description="Identifier of the other participant")


class MessageCreate(BaseModel):
    """Schema for posting a message into an existing chat."""

    body: str = Field(..., min_length=1, max_length=MAX_BODY_LENGTH)


class DirectMessageCreate(BaseModel):
    """Schema for sending a message straight to a user."""

    recipient_id: int = Field(..., ge=1, description="Identifier of the recipient")
    body: str = Field(..., min_length=1, max_length=MAX_BODY_LENGTH)


class MessageRead(BaseModel):
    """Message as returned by the API."""

    id: int
    chat_id: int
    author_id: int
    body: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """Attach UTC to timestamps read back without timezone information."""
        return as_utc(value)


class MessagePage(BaseModel):
    """One page of a chat's history, newest message first."""

    chat_id: int
    page: int
    page_size: int
    messages: list[MessageRead]


class ChatRead(BaseModel):
    """Chat summary including its participants."""

    id: int
    initiator_id: int | None
    recipient_id: int | None
    is_public: bool = False
    participant_ids: list[int]
    participants: list[UserSummary]

    @classmethod
    def from_chat(cls, chat: Chat, *, is_public: bool = False) -> ChatRead:
        """Build the API representation of a loaded chat."""
        return cls(
            id=chat.id,
            initiator_id=chat.initiator_id,
            recipient_id=chat.recipient_id,
            is_public=is_public,
            participant_ids=sorted(chat.participant_ids),
            participants=[UserSummary.model_validate(user) for user in chat.participants],
        )
