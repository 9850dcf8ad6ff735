from .wishlist import WishListEntry


__all__ = [
    "WishListEntry",
]
