from .wishlist_views import WishListViewSet


__all__ = [
    "WishListViewSet",
]
