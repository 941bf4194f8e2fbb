"""Registration and login: bcrypt credential checks and token issuance."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateIdentityError, InvalidCredentialsError
from app.core.security import TokenIssuer, hash_password, verify_password
from app.models import User
from app.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


def normalize_email(email: str) -> str:
    """Emails are stored and looked up trimmed and lower-cased."""
    return email.strip().lower()


class Authenticator:
    """
    Verifies credentials against the users table and issues tokens.

    Raw passwords never reach the database or a log line; only bcrypt hashes
    are stored and compared.
    """

    def __init__(self, db: Session, issuer: TokenIssuer):
        self.db = db
        self.issuer = issuer

    def _find_user(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def register(self, body: RegisterRequest) -> str:
        """Create the account and return a token for it. Raises DuplicateIdentityError."""
        email = normalize_email(body.email)
        if self._find_user(email) is not None:
            raise DuplicateIdentityError(email)

        user = User(
            first_name=body.first_name.strip(),
            last_name=body.last_name.strip(),
            mobile_number=body.mobile_number,
            email=email,
            password_hash=hash_password(body.password),
            role=DEFAULT_ROLE,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self.db.rollback()
            raise DuplicateIdentityError(email) from e
        logger.info("Registered user id=%s", user.id)
        return self.issuer.issue(user.email, user.role)

    def login(self, email: str, password: str) -> str:
        """Return a token for valid credentials. Raises InvalidCredentialsError."""
        user = self._find_user(normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()
        return self.issuer.issue(user.email, user.role)
