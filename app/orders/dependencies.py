# app/orders/dependencies.py
# Request guards for routes addressing a specific order.

from typing import Annotated
import logging

from fastapi import Depends, Path

from ..auth.service import SessionUser
from ..core.exceptions import OrderNotFoundError, ForbiddenError
from ..database.core import DbSession
from .models import Order
from .repository import OrderRepository

logger = logging.getLogger(__name__)


def get_order(db: DbSession, order_id: Annotated[int, Path()]) -> Order:
    order = OrderRepository(db).get_by_id(order_id)
    if not order:
        raise OrderNotFoundError(order_id)
    return order


def protect_order_owner(
    session_user: SessionUser,
    order: Annotated[Order, Depends(get_order)],
) -> Order:
    if order.user_id != session_user.id:
        logger.warning(f"User {session_user.id} tried to read order {order.id}")
        raise ForbiddenError("This order does not belong to you")
    return order


OwnedOrder = Annotated[Order, Depends(protect_order_owner)]
