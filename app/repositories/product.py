"""
In-memory product store following the Repository pattern.

Products are kept in insertion order in a plain list; every lookup is a
linear scan. All access goes through one asyncio lock so readers never see
a half-applied mutation.
"""

import asyncio
import uuid
from typing import Callable, Dict, List, Optional, Tuple

from app.core.errors import DatabaseError
from app.core.logger import logger
from app.models.product import Product, ProductBase

MAX_ID_ATTEMPTS = 5


def generate_product_id() -> str:
    return str(uuid.uuid4())


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, id_factory: Callable[[], str] = generate_product_id):
        self._products: List[Product] = []
        # Every id ever issued is kept so deleted ids are never handed out again;
        # the set grows for the life of the process.
        self._issued_ids = set()
        self._id_factory = id_factory
        self._lock = asyncio.Lock()

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def _next_id(self) -> str:
        # Ids are never reused, even after the product is deleted
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
        logger.error(
            "Could not allocate a unique product id",
            metadata={"event": "id_allocation_failed", "attempts": MAX_ID_ATTEMPTS},
        )
        raise DatabaseError("Could not allocate a unique product id")

    async def create(self, product_data: ProductBase) -> Product:
        """Append a new product with a freshly generated id"""
        async with self._lock:
            product = Product(id=self._next_id(), **product_data.model_dump())
            self._products.append(product)
            return product

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        async with self._lock:
            index = self._index_of(product_id)
            return self._products[index] if index != -1 else None

    async def update(self, product_id: str, product_data: ProductBase) -> Optional[Product]:
        """Replace every field of a product in place; the id never changes"""
        async with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            product = Product(**{**product_data.model_dump(), "id": product_id})
            self._products[index] = product
            return product

    async def delete(self, product_id: str) -> bool:
        async with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return False
            del self._products[index]
            return True

    async def list_products(
        self,
        category: Optional[str] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Product], int]:
        """Return one slice of the filtered products and the filtered total"""
        async with self._lock:
            filtered = [
                p for p in self._products
                if category is None or p.category == category
            ]
        end = skip + limit if limit is not None else None
        return filtered[skip:end], len(filtered)

    async def search_by_name(self, text: str) -> List[Product]:
        """Case-insensitive substring match on the product name"""
        needle = text.lower()
        async with self._lock:
            return [p for p in self._products if needle in p.name.lower()]

    async def get_stats(self) -> Dict[str, object]:
        async with self._lock:
            products = list(self._products)

        categories: Dict[str, int] = {}
        for product in products:
            categories[product.category] = categories.get(product.category, 0) + 1

        in_stock = sum(1 for p in products if p.in_stock)
        return {
            "total_products": len(products),
            "categories": categories,
            "in_stock": in_stock,
            "out_of_stock": len(products) - in_stock,
        }

    async def count(self) -> int:
        async with self._lock:
            return len(self._products)
