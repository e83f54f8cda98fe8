"""Shared API dependencies for authentication and the conversation service."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from learnhub.core.security import decode_access_token
from learnhub.db.session import get_db
from learnhub.models import User
from learnhub.services.access import AccessGuard, get_access_guard
from learnhub.services.conversations import ConversationService

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If token is invalid or user not found
    """
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )

    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_access_guard_dep() -> AccessGuard:
    """Return the access guard for the configured public chat."""
    return get_access_guard()


def get_conversation_service(
    db: SessionDep,
    access_guard: Annotated[AccessGuard, Depends(get_access_guard_dep)],
) -> ConversationService:
    """Build a conversation service bound to the request's session."""
    return ConversationService(db, access_guard)


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
ConversationServiceDep = Annotated[ConversationService, Depends(get_conversation_service)]
