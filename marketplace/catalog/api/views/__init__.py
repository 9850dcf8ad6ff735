from .product_views import ProductViewSet


__all__ = [
    "ProductViewSet",
]
