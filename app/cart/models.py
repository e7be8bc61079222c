import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database.core import Base


class CartStatus(str, enum.Enum):
    ACTIVE = "active"
    PURCHASED = "purchased"


class CartItemStatus(str, enum.Enum):
    ACTIVE = "active"
    REMOVED = "removed"
    PURCHASED = "purchased"


class Cart(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String, nullable=False, default=CartStatus.ACTIVE.value)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    user = relationship("User", back_populates="carts")
    products_in_cart = relationship("ProductInCart", back_populates="cart", cascade="all, delete-orphan")
    order = relationship("Order", back_populates="cart", uselist=False)


class ProductInCart(Base):
    """A product line inside a cart. Only `purchased` lines belong to an order's contents."""
    __tablename__ = "products_in_cart"

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    status = Column(String, nullable=False, default=CartItemStatus.ACTIVE.value)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    cart = relationship("Cart", back_populates="products_in_cart")
    product = relationship("Product")
