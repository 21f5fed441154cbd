"""
Dependency injection for Product service and repository
"""

from fastapi import Depends, Request

from app.repositories.product import ProductRepository
from app.services.product import ProductService


def get_product_repository(request: Request) -> ProductRepository:
    """The store owned by the running application instance"""
    return request.app.state.product_repository


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository)
