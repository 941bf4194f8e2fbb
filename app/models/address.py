"""ORM model for postal addresses."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255), nullable=False)
    building_name = Column(String(255), nullable=False)
    city = Column(String(128), nullable=False)
    state = Column(String(128), nullable=False)
    country = Column(String(128), nullable=False)
    pincode = Column(String(16), nullable=False)
