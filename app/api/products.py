"""
Product API endpoints
Thin HTTP layer; business rules live in ProductService
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.config import config
from app.core.errors import ErrorResponseModel
from app.dependencies.product import get_product_service
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductStatsResponse,
    ProductUpdate,
)
from app.services.product import ProductService

router = APIRouter(responses={401: {"model": ErrorResponseModel}})


@router.get("", response_model=ProductListResponse, responses={400: {"model": ErrorResponseModel}})
async def list_products(
    category: Optional[str] = Query(None, description="Exact category to filter by"),
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(config.default_page_size, ge=1, description="Items per page"),
    service: ProductService = Depends(get_product_service),
):
    """
    List products with an optional category filter and pagination.
    `total` counts every product matching the filter.
    """
    return await service.get_products(category=category, page=page, limit=limit)


# Literal paths must be registered before /{product_id}, otherwise the
# wildcard would capture "search" and "stats" as product ids.
@router.get("/search", response_model=List[ProductResponse], responses={400: {"model": ErrorResponseModel}})
async def search_products(
    name: Optional[str] = Query(None, description="Case-insensitive text to find in product names"),
    service: ProductService = Depends(get_product_service),
):
    """Search products by name."""
    return await service.search_products(name)


@router.get("/stats", response_model=ProductStatsResponse)
async def get_stats(service: ProductService = Depends(get_product_service)):
    """Counts of all, in-stock and out-of-stock products, and products per category."""
    return await service.get_stats()


@router.get("/{product_id}", response_model=ProductResponse, responses={404: {"model": ErrorResponseModel}})
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}},
)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product. The id is generated by the server;
    any id in the request body is ignored.
    """
    return await service.create_product(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def update_product(
    product_id: str,
    product: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """Replace every field of a product. The id from the path always wins."""
    return await service.update_product(product_id, product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
