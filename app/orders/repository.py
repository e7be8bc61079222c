"""
Order Repository

Order history reads. Every method returns orders shaped as

    Order
      └─ cart: Cart
           └─ products_in_cart: [ProductInCart]   (status == "purchased" only)
                └─ product: Product
                     └─ images: [ProductImg]

so the response layer can serialize them without further queries.
"""
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from ..database.models import Order, Cart, ProductInCart, Product, CartItemStatus


def _purchased_contents():
    return (
        selectinload(Order.cart)
        .selectinload(Cart.products_in_cart.and_(ProductInCart.status == CartItemStatus.PURCHASED.value))
        .selectinload(ProductInCart.product)
        .selectinload(Product.images)
    )


class OrderRepository:

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Bare order lookup, used by the ownership guard."""
        return self.db.query(Order).filter(Order.id == order_id).first()

    def list_with_purchased_items(self, user_id: int) -> List[Order]:
        return (
            self.db.query(Order)
            .filter(Order.user_id == user_id)
            .options(_purchased_contents())
            .populate_existing()
            .all()
        )

    def get_with_purchased_items(self, order_id: int) -> Optional[Order]:
        return (
            self.db.query(Order)
            .filter(Order.id == order_id)
            .options(_purchased_contents())
            .populate_existing()
            .first()
        )
