import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database.core import Base


class OrderStatus(str, enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Snapshot of the cart that was purchased
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False, unique=True)
    total_price = Column(Float, nullable=False)
    status = Column(String, nullable=False, default=OrderStatus.ACTIVE.value)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    user = relationship("User", back_populates="orders")
    cart = relationship("Cart", back_populates="order")
