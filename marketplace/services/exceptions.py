"""
Domain errors raised by marketplace services.

Services raise these and never catch them; the API layer maps them to HTTP
responses. Anything else (database connectivity, constraint violations)
propagates untouched.
"""

from .base import ErrorCodes


class ServiceError(Exception):
    """Base class for expected service failures."""

    error_code = ErrorCodes.INTERNAL_ERROR

    def __init__(self, detail: str = ""):
        self.detail = detail or self.error_code
        super().__init__(self.detail)


class ReferenceNotFound(ServiceError):
    """An operation referenced an identifier that is absent from the store."""

    error_code = ErrorCodes.REFERENCE_NOT_FOUND


class ProductNotFound(ReferenceNotFound):
    error_code = ErrorCodes.PRODUCT_NOT_FOUND

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} does not exist")


class ProductOptionNotFound(ReferenceNotFound):
    error_code = ErrorCodes.PRODUCT_OPTION_NOT_FOUND

    def __init__(self, option_id):
        self.option_id = option_id
        super().__init__(f"Product option {option_id} does not exist")


class OrderNotFound(ReferenceNotFound):
    error_code = ErrorCodes.ORDER_NOT_FOUND

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order {order_id} does not exist")


class DuplicateOptionName(ServiceError):
    error_code = ErrorCodes.DUPLICATE_OPTION_NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Option '{name}' already exists for this product")


class InvalidQuantity(ServiceError):
    error_code = ErrorCodes.INVALID_QUANTITY


class InsufficientStock(ServiceError):
    error_code = ErrorCodes.INSUFFICIENT_STOCK

    def __init__(self, option_id, requested: int, available: int):
        self.option_id = option_id
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient stock. Requested: {requested}, Available: {available}")
