from marketplace.catalog.domain.models import Product, ProductOption
from marketplace.ordering.domain.models import Order
from marketplace.wishlist.domain.models import WishListEntry


__all__ = [
    "Product",
    "ProductOption",
    "WishListEntry",
    "Order",
]
