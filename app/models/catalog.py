"""ORM models for the product catalog: categories and their products."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(255), nullable=False, unique=True, index=True)

    products = relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
    )


class Product(Base):
    """
    Sellable item. special_price is derived from price and discount (percent)
    and stored so listings can sort by it.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    image = Column(String(255), nullable=False, default="default.png")
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)
    discount = Column(Float, nullable=False, default=0.0)
    special_price = Column(Float, nullable=False)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category = relationship("Category", back_populates="products")
