"""
Dependency Injection Container
================================

Simple service locator for the application's services. Views ask the
container for a service instead of constructing it, so tests can swap in
fakes and every request shares one set of stateless service instances.

Usage:
    from infrastructure.container import container

    wishlist_service = container.wishlist_service()
    order_service = container.order_service()
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for domain services.

    Implements lazy initialization and caching of service instances.
    Singleton: every ServiceContainer() call returns the same object.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._product_service = None
            self._wishlist_service = None
            self._order_service = None
            self._auth_service = None

            self._initialized = True
            logger.info("Service container initialized")

    def product_service(self):
        """Get ProductService instance."""
        if self._product_service is None:
            from marketplace.services import ProductService

            self._product_service = ProductService()
            logger.debug("Created ProductService")
        return self._product_service

    def wishlist_service(self):
        """Get WishListService instance."""
        if self._wishlist_service is None:
            from marketplace.services import WishListService
            from marketplace.wishlist.domain.mappers import WishListMapper

            # WishListService depends on ProductService for reference checks
            self._wishlist_service = WishListService(product_service=self.product_service(), mapper=WishListMapper())
            logger.debug("Created WishListService")
        return self._wishlist_service

    def order_service(self):
        """Get OrderService instance."""
        if self._order_service is None:
            from marketplace.services import OrderService

            self._order_service = OrderService(product_service=self.product_service())
            logger.debug("Created OrderService")
        return self._order_service

    def auth_service(self):
        """Get AuthService instance."""
        if self._auth_service is None:
            from authentication.domain.services import AuthService

            self._auth_service = AuthService()
            logger.debug("Created AuthService")
        return self._auth_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._product_service = None
        self._wishlist_service = None
        self._order_service = None
        self._auth_service = None
        logger.info("Service container reset")


# Global singleton instance
container = ServiceContainer()
