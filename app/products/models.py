# app/products/models.py

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database.core import Base


class ProductStatus(str, enum.Enum):
    ACTIVE = "active"
    REMOVED = "removed"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default=ProductStatus.ACTIVE.value)
    # Seller who listed the product
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # --- Relationships ---
    user = relationship("User", back_populates="products")
    images = relationship("ProductImg", back_populates="product", cascade="all, delete-orphan")


class ProductImg(Base):
    __tablename__ = "product_imgs"

    id = Column(Integer, primary_key=True, index=True)
    img_url = Column(String, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    status = Column(String, nullable=False, default=ProductStatus.ACTIVE.value)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    product = relationship("Product", back_populates="images")
