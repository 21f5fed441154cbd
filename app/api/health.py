"""
Health endpoint for load balancers and orchestrators
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.config import config
from app.dependencies.product import get_product_repository
from app.repositories.product import ProductRepository

router = APIRouter()


@router.get("/health")
async def health_check(repository: ProductRepository = Depends(get_product_repository)):
    """Basic health check; also reports how many products are held in memory"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": config.service_version,
        "products": await repository.count(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
