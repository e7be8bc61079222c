from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .products import ProductResponse


class ProductInCartResponse(BaseModel):
    id: int
    cart_id: int
    product_id: int
    quantity: int
    status: str
    product: ProductResponse

    model_config = ConfigDict(from_attributes=True)


class CartResponse(BaseModel):
    id: int
    user_id: int
    status: str
    products_in_cart: List[ProductInCartResponse] = []

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """An order with the purchased contents of its cart."""
    id: int
    user_id: int
    cart_id: int
    total_price: float
    status: str
    created_at: Optional[datetime] = None
    cart: Optional[CartResponse] = None

    model_config = ConfigDict(from_attributes=True)


class OrderListData(BaseModel):
    orders: List[OrderResponse]


class OrderData(BaseModel):
    order: OrderResponse
