"""
Request dependencies: session identity, database session, ownership lookups.

Identity comes from a JWT in the `access_token` cookie or a Bearer header.
Every lookup of user data filters on user_id in SQL, so another user's
record is indistinguishable from a missing one (404). Activity blocks have
no user_id of their own and are authorized through their plan.
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any
from uuid import UUID

from fastapi import Cookie, Depends, Header
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.config import get_settings
from grindlog.db.models import ActivityBlock, CustomActivityBlock, Plan, User
from grindlog.db.session import get_db
from grindlog.errors import NotFoundError, UnauthorizedError

ACCESS_TOKEN_COOKIE = "access_token"


# =============================================================================
# JWT UTILITIES
# =============================================================================


def create_access_token(user_id: UUID, email: str) -> str:
    """
    Create a JWT access token for a user.

    Token payload contains:
    - sub: user_id as string (standard JWT subject claim)
    - email: the account email, so /auth/session needs no database hit
    - exp: expiration timestamp
    """
    settings = get_settings()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """
    Decode and validate a JWT access token.

    Returns {"user_id": UUID, "email": str} if valid, None if invalid/expired.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        user_id_str = payload.get("sub")
        if user_id_str is None:
            return None
        return {"user_id": UUID(user_id_str), "email": payload.get("email")}
    except (JWTError, ValueError):
        return None


# =============================================================================
# AUTHENTICATION DEPENDENCIES
# =============================================================================


async def get_optional_token(
    authorization: Annotated[str | None, Header()] = None,
    access_token: Annotated[str | None, Cookie()] = None,
) -> str | None:
    """
    Extract JWT token from request, if one was sent.

    Supports two methods (in order of preference):
    1. HttpOnly cookie named 'access_token' (recommended for web apps)
    2. Authorization header: 'Bearer <token>'
    """
    if access_token:
        return access_token

    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]

    return None


async def get_token_from_request(
    token: Annotated[str | None, Depends(get_optional_token)],
) -> str:
    """Like get_optional_token, but a missing token is a 401."""
    if token is None:
        raise UnauthorizedError("Not authenticated")
    return token


async def get_current_user(
    token: Annotated[str, Depends(get_token_from_request)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Resolve the session token to a User row.

    Routes take it as `current_user: CurrentUser`. A bad or expired token,
    or a token for a deleted account, is UnauthorizedError.
    """
    identity = decode_access_token(token)
    if identity is None:
        raise UnauthorizedError("Could not validate credentials")

    result = await db.execute(select(User).where(User.id == identity["user_id"]))
    user = result.scalar_one_or_none()

    if user is None:
        raise UnauthorizedError("Could not validate credentials")

    return user


# Type alias for dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
OptionalToken = Annotated[str | None, Depends(get_optional_token)]


# =============================================================================
# QUERY HELPERS (enforce user scoping at query level)
# =============================================================================


async def get_user_resource_or_404(
    db: AsyncSession,
    model: type,
    resource_id: UUID,
    user_id: UUID,
):
    """
    Generic helper to fetch a user-owned resource by ID.

    Usage:
        log = await get_user_resource_or_404(db, DailyLog, log_id, current_user.id)

    This enforces user scoping at the SQL level (WHERE user_id = ...).
    Another user's resource is reported as not found.
    """
    result = await db.execute(
        select(model).where(model.id == resource_id, model.user_id == user_id)
    )
    resource = result.scalar_one_or_none()

    if resource is None:
        raise NotFoundError(f"{model.__name__} not found")

    return resource


async def get_user_plan_or_404(db: AsyncSession, plan_id: UUID, user_id: UUID) -> Plan:
    """Fetch one of the user's plans; blocks are authorized through this."""
    result = await db.execute(select(Plan).where(Plan.id == plan_id, Plan.user_id == user_id))
    plan = result.scalar_one_or_none()
    if plan is None:
        raise NotFoundError("Plan not found")
    return plan


async def get_user_activity_block_or_404(
    db: AsyncSession, block_id: UUID, user_id: UUID
) -> ActivityBlock | CustomActivityBlock:
    """Find a block of either kind that sits in one of the user's plans."""
    for model in (ActivityBlock, CustomActivityBlock):
        result = await db.execute(
            select(model)
            .join(Plan, model.plan_id == Plan.id)
            .where(model.id == block_id, Plan.user_id == user_id)
        )
        block = result.scalar_one_or_none()
        if block is not None:
            return block
    raise NotFoundError("Activity block not found")
