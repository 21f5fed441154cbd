"""
Product service containing business logic layer
"""

from typing import List, Optional

from app.core.errors import NotFoundError, ValidationError
from app.core.logger import logger
from app.models.product import Product
from app.repositories.product import ProductRepository
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductStatsResponse,
    ProductUpdate,
)


def _not_found(product_id: str) -> NotFoundError:
    return NotFoundError(f"Product with ID {product_id} not found")


class ProductService:
    """Service layer for product business logic"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def create_product(self, product_data: ProductCreate) -> Product:
        product = await self.repository.create(product_data)

        logger.info(
            f"Created product {product.id}",
            metadata={"event": "create_product", "product_id": product.id}
        )
        return product

    async def get_product(self, product_id: str) -> Product:
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise _not_found(product_id)

        logger.debug(
            f"Fetched product {product_id}",
            metadata={"event": "get_product", "product_id": product_id}
        )
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate) -> Product:
        """Replace all fields of a product; the id always comes from the path"""
        product = await self.repository.update(product_id, product_data)
        if not product:
            raise _not_found(product_id)

        logger.info(
            f"Updated product {product_id}",
            metadata={"event": "update_product", "product_id": product_id}
        )
        return product

    async def delete_product(self, product_id: str) -> None:
        if not await self.repository.delete(product_id):
            raise _not_found(product_id)

        logger.info(
            f"Deleted product {product_id}",
            metadata={"event": "delete_product", "product_id": product_id}
        )

    async def get_products(
        self,
        category: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> ProductListResponse:
        """List products with an optional category filter, one page at a time.

        Pages are 1-based: page N holds filtered items [(N-1)*limit, N*limit).
        `total` is the size of the filtered set, not of the page.
        """
        products, total = await self.repository.list_products(
            category=category, skip=(page - 1) * limit, limit=limit
        )

        logger.debug(
            f"Fetched {len(products)} products",
            metadata={
                "event": "list_products",
                "count": len(products),
                "total": total,
                "category": category,
                "page": page,
                "limit": limit,
            }
        )

        return ProductListResponse(
            total=total,
            page=page,
            limit=limit,
            products=[p.model_dump() for p in products],
        )

    async def search_products(self, name: Optional[str]) -> List[Product]:
        if not name:
            raise ValidationError("Name parameter is required")

        results = await self.repository.search_by_name(name)

        logger.debug(
            f"Search matched {len(results)} products",
            metadata={"event": "search_products", "name": name, "count": len(results)}
        )
        return results

    async def get_stats(self) -> ProductStatsResponse:
        stats = await self.repository.get_stats()

        logger.debug(
            "Product statistics computed",
            metadata={"event": "product_stats", "stats": stats}
        )
        return ProductStatsResponse(**stats)
