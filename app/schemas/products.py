from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProductImgResponse(BaseModel):
    id: int
    img_url: str
    product_id: int
    status: str

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    price: float
    quantity: int
    status: str
    user_id: int
    created_at: Optional[datetime] = None
    images: List[ProductImgResponse] = []

    model_config = ConfigDict(from_attributes=True)


class ProductListData(BaseModel):
    products: List[ProductResponse]
