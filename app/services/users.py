"""User lookups."""

from sqlalchemy.orm import Session

from app.core.exceptions import ResourceNotFoundError
from app.models import User
from app.schemas.auth import UserProfile


def get_user_by_email(db: Session, email: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise ResourceNotFoundError("User", "email", email)
    return user


def get_profile(db: Session, email: str) -> UserProfile:
    return UserProfile.model_validate(get_user_by_email(db, email))
