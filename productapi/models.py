# productapi/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")


class ProductPage(BaseModel):
    total: int
    page: Optional[int]
    limit: Optional[int]
    data: List[Product]


class DeletedProduct(BaseModel):
    message: str
    product: Product
