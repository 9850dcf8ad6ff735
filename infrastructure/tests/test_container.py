"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from django.test import SimpleTestCase

from authentication.domain.services import AuthService
from infrastructure.container import ServiceContainer, container
from marketplace.services import OrderService, ProductService, WishListService


class ServiceContainerTest(SimpleTestCase):
    """Test ServiceContainer implementation."""

    def setUp(self):
        """Set up test fixtures."""
        # Reset container before each test
        container.reset()

    def tearDown(self):
        container.reset()

    def test_container_is_singleton(self):
        """Test that ServiceContainer is a singleton."""
        container1 = ServiceContainer()
        container2 = ServiceContainer()

        self.assertIs(container1, container2)
        self.assertIs(container1, container)

    def test_get_product_service(self):
        service = container.product_service()

        self.assertIsInstance(service, ProductService)
        # Second call should return cached instance
        self.assertIs(service, container.product_service())

    def test_wishlist_service_shares_product_service(self):
        wishlist_service = container.wishlist_service()

        self.assertIsInstance(wishlist_service, WishListService)
        self.assertIs(wishlist_service.product_service, container.product_service())
        self.assertIs(wishlist_service, container.wishlist_service())

    def test_order_service_shares_product_service(self):
        order_service = container.order_service()

        self.assertIsInstance(order_service, OrderService)
        self.assertIs(order_service.product_service, container.product_service())

    def test_get_auth_service(self):
        self.assertIsInstance(container.auth_service(), AuthService)

    def test_reset_drops_cached_instances(self):
        """Test that reset() forces new instances on next access."""
        before = container.wishlist_service()

        container.reset()

        self.assertIsNot(before, container.wishlist_service())
