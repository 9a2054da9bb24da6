import logging

from fastapi import Depends, Header, HTTPException, Request, status

from eventboard.core.errors import NotFoundError, TokenError
from eventboard.core.security import TokenManager
from eventboard.models.user import User
from eventboard.repositories import (
    TortoiseEventRepository,
    TortoiseGroupRepository,
    TortoiseUserRepository,
)
from eventboard.services import (
    DefaultEventService,
    DefaultGroupService,
    DefaultUserService,
    EventService,
    GroupService,
    UserService,
)

logger = logging.getLogger("uvicorn.error")


# ------------------------------------------------------------------------------
# Service providers (override in tests via app.dependency_overrides)
# ------------------------------------------------------------------------------
def get_user_service() -> UserService:
    return DefaultUserService(TortoiseUserRepository())


def get_group_service() -> GroupService:
    return DefaultGroupService(TortoiseGroupRepository())


def get_event_service() -> EventService:
    return DefaultEventService(TortoiseEventRepository())


def get_token_manager(request: Request) -> TokenManager:
    """The process-wide TokenManager created at startup (see main.py)."""
    return request.app.state.tokens


# ------------------------------------------------------------------------------
# Authentication
# ------------------------------------------------------------------------------
async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    tokens: TokenManager = Depends(get_token_manager),
    users: UserService = Depends(get_user_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Extracts the bearer token from the Authorization header, verifies its
    signature and expiry, loads the referenced user and attaches it to
    `request.state.user`. Performs exactly one user lookup per request.

    Returns:
        User: The authenticated user object from database

    Raises:
        HTTPException (401): No bearer token, or the token is invalid/expired
        HTTPException (403): The token is valid but its user no longer exists

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="You are not logged in")

    try:
        user_id = tokens.verify(token)
    except TokenError as exc:
        logger.info("[auth] rejected token: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    try:
        user = await users.get_user(user_id)
    except NotFoundError:
        logger.warning("[auth] token for missing user id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="The user belonging to this token no longer exists",
        )

    request.state.user = user
    return user
