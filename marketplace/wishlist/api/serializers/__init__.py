from .wishlist_serializers import WishListAddSerializer, WishListQuerySerializer


__all__ = [
    "WishListAddSerializer",
    "WishListQuerySerializer",
]
