from typing import List

from sqlalchemy.orm import Session, selectinload

from ..database.models import Product


class ProductRepository:

    def __init__(self, db: Session):
        self.db = db

    def list_with_images_for_user(self, user_id: int) -> List[Product]:
        """Products listed by `user_id`, each with `images` loaded."""
        return (
            self.db.query(Product)
            .filter(Product.user_id == user_id)
            .options(selectinload(Product.images))
            .populate_existing()
            .all()
        )
