from .order_serializers import OrderCreateSerializer, OrderListQuerySerializer, OrderSerializer


__all__ = [
    "OrderCreateSerializer",
    "OrderListQuerySerializer",
    "OrderSerializer",
]
