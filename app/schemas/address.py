"""Pydantic schemas for postal addresses."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AddressIn(BaseModel):
    street: str = Field(..., min_length=5, max_length=255)
    building_name: str = Field(..., min_length=5, max_length=255)
    city: str = Field(..., min_length=4, max_length=128)
    state: str = Field(..., min_length=2, max_length=128)
    country: str = Field(..., min_length=2, max_length=128)
    pincode: str = Field(..., min_length=6, max_length=16, pattern=r"^[0-9A-Za-z -]+$")


class AddressOut(AddressIn):
    model_config = ConfigDict(from_attributes=True)

    address_id: int = Field(..., validation_alias=AliasChoices("id", "address_id"))
