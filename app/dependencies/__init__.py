"""
Dependencies module initialization
"""

from .product import get_product_repository, get_product_service

__all__ = [
    "get_product_repository",
    "get_product_service",
]
