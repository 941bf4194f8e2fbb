"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class RegisterRequest(BaseModel):
    """New account details. Email is the login identity."""

    first_name: str = Field(..., min_length=1, max_length=64)
    last_name: str = Field(..., min_length=1, max_length=64)
    mobile_number: str = Field(
        default="",
        max_length=16,
        pattern=r"^\+?[0-9]*$",
        description="Digits only, optional leading +",
    )
    email: EmailStr
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class TokenResponse(BaseModel):
    """
    JWT returned by both register and login, serialised as {"jwt-token": ...}.
    Send it back in the Authorization header as: Bearer <token>
    """

    model_config = ConfigDict(populate_by_name=True)

    jwt_token: str = Field(..., alias="jwt-token", description="JWT access token")


class CurrentUser(BaseModel):
    """Authenticated user for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str


class UserProfile(BaseModel):
    """Public view of a user account (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    mobile_number: str
    email: str
    role: str
