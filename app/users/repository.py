"""
User Repository

Handles all database operations for the users table.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..database.models import User, UserStatus

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user data access."""

    def __init__(self, db: Session):
        self.db = db

    def list_active(self) -> List[User]:
        return self.db.query(User).filter(User.status == UserStatus.ACTIVE.value).all()

    def get_by_email(self, email: str) -> Optional[User]:
        """Any user with this email, whatever its status."""
        return self.db.query(User).filter(User.email == email).first()

    def get_active_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(
            User.email == email,
            User.status == UserStatus.ACTIVE.value,
        ).first()

    def get_active_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(
            User.id == user_id,
            User.status == UserStatus.ACTIVE.value,
        ).first()

    def create(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password=password_hash)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update(self, user: User, **fields) -> User:
        """Apply the given column values; `None` values are skipped."""
        for name, value in fields.items():
            if value is not None:
                setattr(user, name, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def disable(self, user: User) -> User:
        user.status = UserStatus.DISABLED.value
        self.db.commit()
        self.db.refresh(user)
        return user
