"""
OrderService - placing and reading orders against product options.
"""

from typing import List

from django.db import transaction

from marketplace.models import Order

from .base import BaseService, paginate
from .exceptions import InvalidQuantity, OrderNotFound
from .product_service import ProductService


class OrderService(BaseService):
    """
    Service for member orders.

    The referenced option is locked and its stock taken before the order row
    is written. A missing option fails with ProductOptionNotFound instead of
    a foreign key violation at commit, and the stock change rolls back with
    the order.
    """

    def __init__(self, product_service: ProductService = None):
        super().__init__()
        self.product_service = product_service or ProductService()

    @BaseService.log_performance
    @transaction.atomic
    def place_order(self, member, option_id: int, quantity: int = 1, message: str = "") -> Order:
        """
        Create an order for option_id.

        Args:
            member: Member placing the order
            option_id: ProductOption being bought
            quantity: Units ordered, at least 1 and no more than the option stock
            message: Free-form note attached to the order

        Raises:
            InvalidQuantity: quantity below 1
            ProductOptionNotFound: the option does not exist
            InsufficientStock: the option has fewer than quantity units left
        """
        if quantity < 1:
            raise InvalidQuantity("Quantity must be at least 1")

        option = self.product_service.reserve_option_stock(option_id, quantity)

        order = Order(member=member, product_option=option, quantity=quantity, message=message)
        order.stamp_created()
        order.save()

        self.logger.info(f"Member {member.id} ordered {quantity}x option {option_id} (order {order.id})")
        return order

    def get_order(self, member, order_id: int) -> Order:
        try:
            return Order.objects.select_related("product_option__product").get(id=order_id, member=member)
        except Order.DoesNotExist:
            raise OrderNotFound(order_id) from None

    @BaseService.log_performance
    def list_orders(self, member, page: int = 0, page_size: int = 20) -> List[Order]:
        """One zero-based page of member's orders, newest first."""
        queryset = Order.objects.filter(member=member).select_related("product_option__product")
        return paginate(queryset.order_by("-created_at", "-id"), page, page_size)
