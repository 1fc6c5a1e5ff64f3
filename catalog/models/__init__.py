"""
Data models for the product catalog.

This module contains pure data classes with no business logic.
"""

from .product import (
    AdminTableRow,
    BuyLink,
    CatalogStatistics,
    LinkFormat,
    Notification,
    ProductCard,
    ProductDetail,
    SupplierLink,
)

__all__ = [
    'AdminTableRow',
    'BuyLink',
    'CatalogStatistics',
    'LinkFormat',
    'Notification',
    'ProductCard',
    'ProductDetail',
    'SupplierLink',
]
