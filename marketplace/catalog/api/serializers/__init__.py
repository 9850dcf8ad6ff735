from .product_serializers import (
    ProductCreateUpdateSerializer,
    ProductDetailSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductOptionInputSerializer,
    ProductOptionSerializer,
    ProductTransportSerializer,
)


__all__ = [
    "ProductCreateUpdateSerializer",
    "ProductDetailSerializer",
    "ProductListQuerySerializer",
    "ProductListSerializer",
    "ProductOptionInputSerializer",
    "ProductOptionSerializer",
    "ProductTransportSerializer",
]
