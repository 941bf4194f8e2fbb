"""Address CRUD."""

import logging

from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Address
from app.schemas.address import AddressIn, AddressOut

logger = logging.getLogger(__name__)


def _get_or_404(db: Session, address_id: int) -> Address:
    address = db.get(Address, address_id)
    if address is None:
        raise ResourceNotFoundError("Address", "address_id", address_id)
    return address


def _find_identical(db: Session, body: AddressIn, exclude_id: int | None = None) -> Address | None:
    query = db.query(Address).filter_by(**body.model_dump())
    if exclude_id is not None:
        query = query.filter(Address.id != exclude_id)
    return query.first()


def create_address(db: Session, body: AddressIn) -> AddressOut:
    if _find_identical(db, body) is not None:
        raise DuplicateResourceError("Address already exists.", details=body.model_dump())
    address = Address(**body.model_dump())
    db.add(address)
    db.commit()
    db.refresh(address)
    return AddressOut.model_validate(address)


def get_addresses(db: Session) -> list[AddressOut]:
    return [AddressOut.model_validate(a) for a in db.query(Address).order_by(Address.id).all()]


def get_address(db: Session, address_id: int) -> AddressOut:
    return AddressOut.model_validate(_get_or_404(db, address_id))


def update_address(db: Session, address_id: int, body: AddressIn) -> AddressOut:
    address = _get_or_404(db, address_id)
    if _find_identical(db, body, exclude_id=address_id) is not None:
        raise DuplicateResourceError("Address already exists.", details=body.model_dump())
    for field, value in body.model_dump().items():
        setattr(address, field, value)
    db.commit()
    db.refresh(address)
    return AddressOut.model_validate(address)


def delete_address(db: Session, address_id: int) -> str:
    address = _get_or_404(db, address_id)
    db.delete(address)
    db.commit()
    logger.info("Deleted address id=%s", address_id)
    return f"Address deleted successfully with address_id: {address_id}"
