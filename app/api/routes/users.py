"""Endpoints about the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser, UserProfile
from app.services.users import get_profile

router = APIRouter()


@router.get("/users/me", response_model=UserProfile)
def read_me(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserProfile:
    return get_profile(db, user.email)
