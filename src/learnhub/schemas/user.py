"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Public fields of a user shown next to chats and in search results."""

    id: int
    username: str
    avatar: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserSearchResponse(BaseModel):
    """Users matching a username search."""

    users: list[UserSummary] = Field(default_factory=list)
