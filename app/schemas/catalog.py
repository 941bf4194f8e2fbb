"""Pydantic schemas for categories and products."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _strip_required(value: str) -> str:
    """Trim surrounding whitespace and reject blank names."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


class CategoryCreate(BaseModel):
    category_name: str = Field(..., min_length=5, max_length=255)

    @field_validator("category_name")
    @classmethod
    def validate_category_name(cls, v: str) -> str:
        return _strip_required(v)


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category_id: int = Field(..., validation_alias=AliasChoices("id", "category_id"))
    category_name: str


class ProductCreate(BaseModel):
    """Product fields supplied by an admin. special_price is computed, never sent."""

    product_name: str = Field(..., min_length=3, max_length=255)
    description: str = Field(default="", max_length=10_000)
    image: str = Field(default="default.png", max_length=255)
    quantity: int = Field(default=0, ge=0)
    price: float = Field(..., ge=0)
    discount: float = Field(default=0.0, ge=0, le=100, description="Percent off price.")

    @field_validator("product_name")
    @classmethod
    def validate_product_name(cls, v: str) -> str:
        return _strip_required(v)


class ProductUpdate(ProductCreate):
    pass


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: int = Field(..., validation_alias=AliasChoices("id", "product_id"))
    product_name: str
    description: str
    image: str
    quantity: int
    price: float
    discount: float
    special_price: float
    category_id: int
