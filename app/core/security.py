"""Password hashing and JWT issuing/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import get_settings
from app.core.exceptions import ExpiredTokenError, InvalidSignatureError

# Min/max lengths for email and password validation.
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of an access token."""

    identity: str
    role: str
    expires_at: datetime


class TokenIssuer:
    """
    Stateless JWT signer/verifier holding a single signing key.

    Tokens carry sub (email), role, iat and exp. There is no revocation list:
    a token stays valid until exp even if the user's password changes.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret:
            raise ValueError("signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    def issue(self, identity: str, role: str = "user") -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": identity,
            "role": role,
            "iat": now,
            "exp": now + self._expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.
        Raises ExpiredTokenError past exp, InvalidSignatureError for anything else wrong.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidSignatureError() from e
        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidSignatureError("Invalid token payload.")
        return TokenClaims(
            identity=sub,
            role=str(payload.get("role") or "user"),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide issuer built from settings on first use."""
    settings = get_settings()
    return TokenIssuer(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
