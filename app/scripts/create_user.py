"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@shop.io your-secure-password admin
"""
import argparse
import logging
import sys

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.logging_config import configure_logging
from app.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from app.models.user import User
from app.services.auth import normalize_email

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    email: str,
    password: str,
    role: str = "user",
    first_name: str = "Admin",
    last_name: str = "User",
) -> User | None:
    """Insert a user; return None if the email is already registered."""
    email = normalize_email(email)
    if db.query(User).filter(User.email == email).first() is not None:
        return None
    user = User(
        first_name=first_name,
        last_name=last_name,
        mobile_number="",
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    return user


def main(argv: list[str] | None = None) -> int:
    configure_logging(get_settings().LOG_LEVEL)
    parser = argparse.ArgumentParser(description="Create a Storefront user without going through /register.")
    parser.add_argument("email", help=f"Email (at most {EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if "@" not in email or len(email) > EMAIL_MAX_LEN:
        logger.error("Invalid email address.")
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        logger.error("Password must be %s-%s characters.", PASSWORD_MIN_LEN, PASSWORD_MAX_LEN)
        return 1

    db = SessionLocal()
    try:
        user = create_user(
            db,
            email,
            args.password,
            role=args.role,
            first_name=args.first_name,
            last_name=args.last_name,
        )
        if user is None:
            logger.error("User '%s' already exists.", normalize_email(email))
            return 1
        logger.info("Created user '%s' with role '%s'.", user.email, user.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
