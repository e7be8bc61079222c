# Central models file so every mapper is registered before relationships resolve

from .core import Base

from ..users.models import User, UserStatus
from ..products.models import Product, ProductImg, ProductStatus
from ..cart.models import Cart, CartStatus, ProductInCart, CartItemStatus
from ..orders.models import Order, OrderStatus

# Export all models
__all__ = [
    "Base",
    "User",
    "UserStatus",
    "Product",
    "ProductImg",
    "ProductStatus",
    "Cart",
    "CartStatus",
    "ProductInCart",
    "CartItemStatus",
    "Order",
    "OrderStatus",
]
