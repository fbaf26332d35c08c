"""Authentication schemas."""

from uuid import UUID

from pydantic import EmailStr, Field

from grindlog.schemas.base import BaseSchema, RequestSchema


class CredentialsRequest(RequestSchema):
    """Email + password, used for both sign-up and sign-in."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class SessionUser(BaseSchema):
    """Identity carried by a valid session."""

    id: UUID
    email: str


class SignInResponse(BaseSchema):
    """Response schema for successful sign-in."""

    message: str = "Signed in successfully"
    user: SessionUser
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token expiry in seconds")


class SessionResponse(BaseSchema):
    """Current session; user is null when there is no valid session."""

    user: SessionUser | None = None


class MessageResponse(BaseSchema):
    message: str
