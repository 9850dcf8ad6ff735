from marketplace.catalog.api.views import ProductViewSet
from marketplace.ordering.api.views import OrderViewSet
from marketplace.wishlist.api.views import WishListViewSet

__all__ = [
    "OrderViewSet",
    "ProductViewSet",
    "WishListViewSet",
]
