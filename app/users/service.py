from typing import List
import logging

from sqlalchemy.orm import Session

from .models import User
from .repository import UserRepository
from ..auth.service import TokenIssuer
from ..core.exceptions import DuplicateEmailError, InvalidCredentialsError
from ..database.models import Product, Order
from ..orders.repository import OrderRepository
from ..products.repository import ProductRepository
from ..schemas.user import RegisterUserRequest, UpdateUserRequest, LoginRequest
from ..utils.password_utils import hash_password_async, verify_password_async

logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    def get_active_users(db: Session) -> List[User]:
        """All users whose status is active"""
        return UserRepository(db).list_active()

    @staticmethod
    async def register_user(db: Session, register_request: RegisterUserRequest) -> User:
        """Create an account; the email must not belong to any user, active or disabled."""
        users = UserRepository(db)

        if users.get_by_email(register_request.email):
            logger.info("Registration rejected, email already taken")
            raise DuplicateEmailError()

        password_hash = await hash_password_async(register_request.password)
        new_user = users.create(
            username=register_request.username,
            email=register_request.email,
            password_hash=password_hash,
        )

        logger.info(f"Successfully registered user ID: {new_user.id}")
        return new_user

    @staticmethod
    def update_user(db: Session, user: User, update_request: UpdateUserRequest) -> User:
        """Partial profile update"""
        updated = UserRepository(db).update(
            user,
            username=update_request.username,
            email=update_request.email,
        )
        logger.info(f"Updated profile for user ID: {user.id}")
        return updated

    @staticmethod
    def deactivate_user(db: Session, user: User) -> None:
        UserRepository(db).disable(user)
        logger.info(f"Disabled user ID: {user.id}")

    @staticmethod
    async def login(db: Session, token_issuer: TokenIssuer, login_request: LoginRequest) -> tuple[User, str]:
        """
        Authenticate by email and password and issue an access token.

        Unknown email, disabled account and wrong password all raise the same
        InvalidCredentialsError.
        """
        user = UserRepository(db).get_active_by_email(login_request.email)

        if not user or not await verify_password_async(login_request.password, user.password):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        token = token_issuer.create_access_token(user.id)
        logger.info(f"User ID {user.id} logged in")
        return user, token

    @staticmethod
    def get_user_products(db: Session, user: User) -> List[Product]:
        return ProductRepository(db).list_with_images_for_user(user.id)

    @staticmethod
    def get_user_orders(db: Session, user: User) -> List[Order]:
        return OrderRepository(db).list_with_purchased_items(user.id)

    @staticmethod
    def get_user_order(db: Session, order: Order) -> Order:
        return OrderRepository(db).get_with_purchased_items(order.id)
