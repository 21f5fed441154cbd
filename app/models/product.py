"""
Product model shared by the store, the service and the API schemas
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductBase(BaseModel):
    """Client-editable product fields; serialized with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    category: str = Field(..., min_length=1)
    in_stock: bool


class Product(ProductBase):
    """Product as held by the store; the id is assigned server-side"""
    id: str
