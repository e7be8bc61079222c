# app/users/dependencies.py
# Request guards for routes addressing a specific user account.

from typing import Annotated
import logging

from fastapi import Depends, Path

from ..auth.service import SessionUser
from ..core.exceptions import UserNotFoundError, ForbiddenError
from ..database.core import DbSession
from ..users.models import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def get_target_user(db: DbSession, user_id: Annotated[int, Path()]) -> User:
    """Resolve the `{user_id}` path parameter to an active user."""
    user = UserRepository(db).get_active_by_id(user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


def protect_users_account(
    session_user: SessionUser,
    user: Annotated[User, Depends(get_target_user)],
) -> User:
    """Only the account owner may modify it."""
    if session_user.id != user.id:
        logger.warning(f"User {session_user.id} tried to modify account {user.id}")
        raise ForbiddenError("You are not the owner of this account")
    return user


OwnedUser = Annotated[User, Depends(protect_users_account)]
