"""
ProductService - product lookup and catalog management.

The lookup half (exists / get_entity / update_entity) is the contract the
wishlist and order services rely on. The management half backs the product
endpoints.
"""

from typing import Any, Dict, List, Optional, Sequence

from django.db import transaction
from django.db.models import F

from marketplace.models import Product, ProductOption

from .base import BaseService, paginate, validate_sort
from .exceptions import DuplicateOptionName, InsufficientStock, ProductNotFound, ProductOptionNotFound

PRODUCT_SORT_FIELDS = {"id", "name", "price", "created_at"}
UPDATABLE_FIELDS = ("name", "price", "image_url")


class ProductService(BaseService):
    """
    Service for product lookup and product/option management.

    Responsibilities:
    - Existence checks and aggregate retrieval for other services
    - Persisting an updated product aggregate
    - Product CRUD and option management

    Missing products raise ProductNotFound.
    """

    def exists(self, product_id: int) -> bool:
        return Product.objects.filter(id=product_id).exists()

    def get_entity(self, product_id: int, for_update: bool = False) -> Product:
        """
        Load a product aggregate.

        Args:
            product_id: Product primary key
            for_update: Lock the row until the surrounding transaction ends

        Raises:
            ProductNotFound: no product with that id
        """
        queryset = Product.objects.select_for_update() if for_update else Product.objects.all()
        try:
            return queryset.get(id=product_id)
        except Product.DoesNotExist:
            raise ProductNotFound(product_id) from None

    def update_entity(self, product_id: int, product: Product) -> Product:
        """Persist product back to the row identified by product_id."""
        if product.pk is None or product.pk != product_id:
            raise ProductNotFound(product_id)
        product.save(force_update=True)
        return product

    @BaseService.log_performance
    def list_products(self, page: int = 0, page_size: int = 20, sort: Optional[Sequence[str]] = None) -> List[Product]:
        """
        List one page of products.

        Args:
            page: Zero-based page number
            page_size: Items per page
            sort: Order-by fields, e.g. ["-price", "name"]
        """
        ordering = validate_sort(sort, PRODUCT_SORT_FIELDS, default=("id",))
        return paginate(Product.objects.order_by(*ordering), page, page_size)

    @BaseService.log_performance
    @transaction.atomic
    def create_product(self, data: Dict[str, Any], options: Optional[List[Dict[str, Any]]] = None) -> Product:
        """
        Create a product and its initial options in one transaction.

        Args:
            data: Validated product fields (name, price, image_url)
            options: Optional list of {"name", "quantity"} dicts

        Raises:
            DuplicateOptionName: two options share a name
        """
        product = Product.objects.create(**{field: data[field] for field in UPDATABLE_FIELDS if field in data})

        seen = set()
        for option in options or []:
            if option["name"] in seen:
                raise DuplicateOptionName(option["name"])
            seen.add(option["name"])
            ProductOption.objects.create(product=product, name=option["name"], quantity=option.get("quantity", 1))

        self.logger.info(f"Created product {product.id} with {len(seen)} options")
        return product

    @BaseService.log_performance
    @transaction.atomic
    def update_product(self, product_id: int, data: Dict[str, Any]) -> Product:
        product = self.get_entity(product_id, for_update=True)
        for field in UPDATABLE_FIELDS:
            if field in data:
                setattr(product, field, data[field])
        return self.update_entity(product_id, product)

    @BaseService.log_performance
    @transaction.atomic
    def delete_product(self, product_id: int) -> None:
        """Delete a product; its options, wishlist entries and orders cascade."""
        product = self.get_entity(product_id, for_update=True)
        product.delete()
        self.logger.info(f"Deleted product {product_id}")

    @BaseService.log_performance
    @transaction.atomic
    def add_option(self, product_id: int, name: str, quantity: int = 1) -> ProductOption:
        product = self.get_entity(product_id, for_update=True)
        if product.options.filter(name=name).exists():
            raise DuplicateOptionName(name)
        return ProductOption.objects.create(product=product, name=name, quantity=quantity)

    def list_options(self, product_id: int) -> List[ProductOption]:
        product = self.get_entity(product_id)
        return list(product.options.order_by("id"))

    def get_option(self, option_id: int) -> ProductOption:
        try:
            return ProductOption.objects.select_related("product").get(id=option_id)
        except ProductOption.DoesNotExist:
            raise ProductOptionNotFound(option_id) from None

    def option_exists(self, option_id: int) -> bool:
        return ProductOption.objects.filter(id=option_id).exists()

    def reserve_option_stock(self, option_id: int, quantity: int) -> ProductOption:
        """
        Take quantity units out of an option's stock.

        Must run inside a transaction; the option row stays locked until it ends.

        Raises:
            ProductOptionNotFound: the option does not exist
            InsufficientStock: fewer than quantity units are left
        """
        try:
            option = ProductOption.objects.select_for_update().select_related("product").get(id=option_id)
        except ProductOption.DoesNotExist:
            raise ProductOptionNotFound(option_id) from None

        if quantity > option.quantity:
            raise InsufficientStock(option_id, quantity, option.quantity)

        ProductOption.objects.filter(id=option_id).update(quantity=F("quantity") - quantity)
        option.refresh_from_db(fields=["quantity"])
        self.logger.info(f"Reserved {quantity} units of option {option_id}, {option.quantity} left")
        return option
