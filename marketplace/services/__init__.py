"""
Marketplace Service Layer

Business logic for the marketplace app, one service per aggregate.

Services:
- ProductService: Product lookup plus product/option management
- WishListService: Wishlist add/list/delete
- OrderService: Placing and reading orders

Usage:
    from infrastructure.container import container

    wishlist_service = container.wishlist_service()
    products = wishlist_service.get_wishlists_by_member(member.id)
"""

from .base import BaseService, ErrorCodes, paginate, validate_sort
from .exceptions import (
    DuplicateOptionName,
    InsufficientStock,
    InvalidQuantity,
    OrderNotFound,
    ProductNotFound,
    ProductOptionNotFound,
    ReferenceNotFound,
    ServiceError,
)
from .order_service import OrderService
from .product_service import ProductService
from .wishlist_service import WishListService

__all__ = [
    # Base classes
    "BaseService",
    "ErrorCodes",
    "paginate",
    "validate_sort",
    # Errors
    "ServiceError",
    "ReferenceNotFound",
    "ProductNotFound",
    "ProductOptionNotFound",
    "OrderNotFound",
    "DuplicateOptionName",
    "InsufficientStock",
    "InvalidQuantity",
    # Services
    "ProductService",
    "WishListService",
    "OrderService",
]
