"""
Authentication Routes

Endpoints:
- POST /auth/signup - Create an account (email + password)
- POST /auth/signin - Exchange credentials for a session
- POST /auth/logout - Clear session
- GET /auth/session - Identity of the current session, or null
- GET /auth/me - Get current user profile

Security:
- Passwords are stored as bcrypt hashes, never returned
- Emails are stored lower-cased; lookups are case-insensitive
- JWT is HttpOnly cookie + response body (client chooses how to use)
"""

import logging

from fastapi import APIRouter, Response, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.api.deps import (
    ACCESS_TOKEN_COOKIE,
    CurrentUser,
    DbSession,
    OptionalToken,
    create_access_token,
    decode_access_token,
)
from grindlog.config import get_settings
from grindlog.db.models import User
from grindlog.errors import UnauthorizedError, ValidationError
from grindlog.schemas.auth import (
    CredentialsRequest,
    MessageResponse,
    SessionResponse,
    SessionUser,
    SignInResponse,
)
from grindlog.schemas.user import UserRead
from grindlog.services.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _cookie_options() -> dict:
    settings = get_settings()
    return {
        "httponly": True,
        "secure": settings.cookie_cross_domain or settings.environment != "development",
        "samesite": "none" if settings.cookie_cross_domain else "lax",
        "path": "/",
    }


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: CredentialsRequest, db: DbSession) -> MessageResponse:
    """
    Create an account. The user signs in separately afterwards.

    The lookup and the insert are not atomic; a concurrent signup for the
    same email trips the unique constraint and gets the same error.
    """
    settings = get_settings()
    if len(request.password) < settings.password_min_length:
        raise ValidationError(
            f"Password must be at least {settings.password_min_length} characters"
        )

    email = request.email.lower()
    if await find_user_by_email(db, email) is not None:
        raise ValidationError("User already exists")

    user = User(email=email, password_hash=hash_password(request.password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ValidationError("User already exists") from None
    logger.info("Created user %s", user.id)

    return MessageResponse(message="Account created successfully. Please sign in.")


@router.post("/signin", response_model=SignInResponse)
async def signin(
    request: CredentialsRequest,
    response: Response,
    db: DbSession,
) -> SignInResponse:
    """
    Exchange email + password for a session JWT.

    Wrong email and wrong password produce the same 401 so the endpoint
    does not reveal which accounts exist.
    """
    settings = get_settings()
    user = await find_user_by_email(db, request.email)

    if user is None or not verify_password(request.password, user.password_hash):
        raise UnauthorizedError("Invalid email or password")

    access_token = create_access_token(user.id, user.email)
    expires_in = settings.jwt_expire_minutes * 60

    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=access_token,
        max_age=expires_in,
        **_cookie_options(),
    )

    return SignInResponse(
        user=SessionUser(id=user.id, email=user.email),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    """
    Clear the authentication session.

    Note: This only clears the cookie. If the client stored the JWT
    elsewhere, it remains valid until expiry.
    """
    response.delete_cookie(key=ACCESS_TOKEN_COOKIE, **_cookie_options())


@router.get("/session", response_model=SessionResponse)
async def get_session(token: OptionalToken) -> SessionResponse:
    """Return the identity in the session token. Never fails; user is null when signed out."""
    if token is None:
        return SessionResponse(user=None)
    identity = decode_access_token(token)
    if identity is None or identity["email"] is None:
        return SessionResponse(user=None)
    return SessionResponse(user=SessionUser(id=identity["user_id"], email=identity["email"]))


@router.get("/me", response_model=UserRead)
async def get_me(current_user: CurrentUser) -> UserRead:
    """Get the current authenticated user's profile."""
    return UserRead.model_validate(current_user)
