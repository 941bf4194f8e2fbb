"""Address endpoints (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.routes.auth import require_admin
from app.core.database import get_db
from app.schemas.address import AddressIn, AddressOut
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.services import addresses

router = APIRouter(prefix="/admin")

AddressId = Annotated[int, Path(ge=1)]


@router.post("/addresses", response_model=AddressOut, status_code=status.HTTP_201_CREATED)
def create_address(
    body: AddressIn,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AddressOut:
    return addresses.create_address(db, body)


@router.get("/addresses", response_model=list[AddressOut])
def get_addresses(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[AddressOut]:
    return addresses.get_addresses(db)


@router.get("/addresses/{address_id}", response_model=AddressOut)
def get_address(
    address_id: AddressId,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AddressOut:
    return addresses.get_address(db, address_id)


@router.put("/addresses/{address_id}", response_model=AddressOut)
def update_address(
    address_id: AddressId,
    body: AddressIn,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AddressOut:
    return addresses.update_address(db, address_id, body)


@router.delete("/addresses/{address_id}", response_model=MessageResponse)
def delete_address(
    address_id: AddressId,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message=addresses.delete_address(db, address_id))
