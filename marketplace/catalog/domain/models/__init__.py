from .catalog import Product, ProductOption


__all__ = [
    "Product",
    "ProductOption",
]
