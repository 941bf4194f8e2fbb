"""Register/login endpoints and auth dependencies (get_current_user, require_admin)."""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import TokenError
from app.core.security import TokenIssuer, get_token_issuer
from app.models import User
from app.schemas.auth import CurrentUser, LoginRequest, RegisterRequest, TokenResponse
from app.services.auth import Authenticator

router = APIRouter()
security = HTTPBearer(auto_error=False)

# Letters (any script), spaces, apostrophes and hyphens.
_NAME_RE = re.compile(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$")


def _validate_name(value: str, field: str) -> None:
    if not _NAME_RE.match(value.strip()):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{field} must contain only letters, spaces, hyphens or apostrophes.",
        )


def _validate_password(password: str, email: str) -> None:
    if password.strip().lower() == email.strip().lower():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Password must not be the same as the email.",
        )


def get_authenticator(
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> Authenticator:
    return Authenticator(db, issuer)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[Authenticator, Depends(get_authenticator)],
) -> TokenResponse:
    """Create an account and return a JWT for it (409 if the email is taken)."""
    _validate_name(body.first_name, "first_name")
    _validate_name(body.last_name, "last_name")
    _validate_password(body.password, body.email)

    token = auth.register(body)
    return TokenResponse(jwt_token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    auth: Annotated[Authenticator, Depends(get_authenticator)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <jwt-token>
    """
    token = auth.login(body.email, body.password)
    return TokenResponse(jwt_token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise TokenError("Not authenticated.")
    claims = issuer.verify(credentials.credentials)
    user = db.query(User).filter(User.email == claims.identity).first()
    if user is None:
        raise TokenError("User not found.")
    return CurrentUser(id=user.id, email=user.email, role=user.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
