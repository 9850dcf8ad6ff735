"""
Base classes and utilities for the service layer.

Every marketplace service extends BaseService to get a class-scoped logger and
the log_performance timing decorator. Error codes shared by services and the
HTTP layer live in ErrorCodes.
"""

import logging
import time
from functools import wraps
from typing import Callable, Iterable, List, Optional, Sequence

from django.core.paginator import InvalidPage, Paginator


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class WishListService(BaseService):
            def __init__(self, product_service):
                super().__init__()
                self.product_service = product_service

            @BaseService.log_performance
            def get_wishlists_by_member(self, member_id):
                self.logger.info(f"Listing wishlist for member {member_id}")
                # ... implementation
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and re-raises any exception after logging it.
        Domain errors (ServiceError) are logged as warnings since they are
        expected outcomes such as a missing product.

        Args:
            func: The service method to wrap

        Returns:
            Wrapped function with performance logging
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            from .exceptions import ServiceError

            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms
                self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")
                return result

            except ServiceError as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.warning(f"{method_name} failed with error '{e.error_code}' in {elapsed_time:.2f}ms")
                raise

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


# Common error codes for marketplace services
class ErrorCodes:
    """Standard error codes used across marketplace services."""

    # Reference errors
    REFERENCE_NOT_FOUND = "reference_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_OPTION_NOT_FOUND = "product_option_not_found"
    ORDER_NOT_FOUND = "order_not_found"

    # Validation errors
    DUPLICATE_OPTION_NAME = "duplicate_option_name"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_QUANTITY = "invalid_quantity"
    VALIDATION_ERROR = "validation_error"

    # Internal errors
    INTERNAL_ERROR = "internal_error"


def paginate(queryset, page: int, page_size: int) -> List:
    """Return one zero-based page of an ordered queryset, or [] when the page is out of range."""
    if page_size < 1:
        raise ValueError("page_size must be positive")
    try:
        return list(Paginator(queryset, page_size).page(page + 1).object_list)
    except InvalidPage:
        return []


def validate_sort(sort: Optional[Sequence[str]], allowed: Iterable[str], default: Sequence[str]) -> List[str]:
    """
    Check every order-by field (optionally prefixed with "-") against allowed.

    "id" is appended as a tiebreaker so consecutive pages never overlap.
    """
    if not sort:
        return list(default)
    allowed = set(allowed)
    for field in sort:
        if field.lstrip("-") not in allowed:
            raise ValueError(f"Cannot sort by '{field}'")
    ordering = list(sort)
    if not any(field.lstrip("-") == "id" for field in ordering):
        ordering.append("id")
    return ordering
