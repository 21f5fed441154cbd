"""
Models module initialization
"""

from .product import Product, ProductBase

__all__ = [
    "Product",
    "ProductBase",
]
