"""
API schemas for Product endpoints
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.models.product import ProductBase


class ProductCreate(ProductBase):
    """Schema for creating a new product.

    Strict mode keeps JSON types honest: price must be a number (not a
    string or a boolean) and inStock must be a real boolean. Unknown keys,
    including any client-supplied id, are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")


class ProductUpdate(ProductCreate):
    """Schema for replacing every field of an existing product"""


class ProductResponse(ProductBase):
    """Schema for product responses"""
    id: str


class ProductListResponse(BaseModel):
    """One page of the (optionally filtered) product list"""
    total: int
    page: int
    limit: int
    products: List[ProductResponse]


class ProductStatsResponse(BaseModel):
    """Aggregate counts over the whole store"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_products: int
    categories: Dict[str, int]
    in_stock: int
    out_of_stock: int
