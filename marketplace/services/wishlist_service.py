"""
WishListService - wishlist orchestration.

Validates the referenced product through ProductService, persists wishlist
rows and shapes responses through WishListMapper. Member existence is never
checked: listing for an unknown member simply yields nothing.
"""

from typing import List, Optional, Sequence

from django.db import transaction

from marketplace.models import WishListEntry
from marketplace.wishlist.domain.mappers import ProductTransport, WishListMapper

from .base import BaseService, paginate, validate_sort
from .exceptions import ProductNotFound
from .product_service import ProductService

WISHLIST_SORT_FIELDS = {"id", "product__name", "product__price"}


class WishListService(BaseService):
    """
    Service for managing member wishlists.

    Responsibilities:
    - Add a product to a member's wishlist (product must exist)
    - List a member's wishlisted products, whole or paged
    - Remove one product or everything from a member's wishlist

    Dependencies:
    - ProductService: existence checks and product aggregate updates
    - WishListMapper: entity <-> transport mapping
    """

    def __init__(self, product_service: ProductService = None, mapper: WishListMapper = None):
        super().__init__()
        self.product_service = product_service or ProductService()
        self.mapper = mapper or WishListMapper()

    @BaseService.log_performance
    @transaction.atomic
    def add_wishlist(self, product_id: int, member) -> ProductTransport:
        """
        Add product_id to member's wishlist.

        The new row is attached to the locked product aggregate and the
        aggregate is written back, all inside one transaction.

        Args:
            product_id: Product to wishlist
            member: Member adding the product

        Returns:
            Transport object of the wishlisted product

        Raises:
            ProductNotFound: the product does not exist
        """
        if not self.product_service.exists(product_id):
            raise ProductNotFound(product_id)

        entry = self.mapper.to_entity(product_id, member)
        entry.save()

        product = self.product_service.get_entity(product_id, for_update=True)
        product.wishlist_entries.add(entry)
        self.product_service.update_entity(product_id, product)

        self.logger.info(f"Member {member.id} wishlisted product {product_id} (entry {entry.id})")
        return self.mapper.to_transport(entry).product_transport()

    def _member_entries(self, member_id: int):
        return WishListEntry.objects.filter(member_id=member_id).select_related("member", "product")

    @BaseService.log_performance
    def get_wishlists_by_member(self, member_id: int) -> List[ProductTransport]:
        """Every product member_id wishlisted, in insertion order."""
        entries = self._member_entries(member_id).order_by("id")
        return [self.mapper.to_transport(entry).product_transport() for entry in entries]

    @BaseService.log_performance
    def get_wishlists_by_member_paged(
        self,
        member_id: int,
        page: int = 0,
        page_size: int = 20,
        sort: Optional[Sequence[str]] = None,
    ) -> List[ProductTransport]:
        """
        One page of the products member_id wishlisted.

        Args:
            member_id: Owner of the wishlist
            page: Zero-based page number; out-of-range pages give []
            page_size: Entries per page
            sort: Order-by fields drawn from WISHLIST_SORT_FIELDS, default insertion order
        """
        ordering = validate_sort(sort, WISHLIST_SORT_FIELDS, default=("id",))
        entries = paginate(self._member_entries(member_id).order_by(*ordering), page, page_size)
        return [self.mapper.to_transport(entry).product_transport() for entry in entries]

    @BaseService.log_performance
    @transaction.atomic
    def delete_wishlists_by_member(self, member_id: int) -> bool:
        """Remove every entry of member_id. True when at least one row went away."""
        deleted, _ = WishListEntry.objects.filter(member_id=member_id).delete()
        self.logger.info(f"Cleared {deleted} wishlist entries for member {member_id}")
        return deleted > 0

    @BaseService.log_performance
    @transaction.atomic
    def delete_wishlist(self, product_id: int, member_id: int) -> bool:
        """
        Remove product_id from member_id's wishlist.

        Raises:
            ProductNotFound: the product does not exist, even if a matching row does
        """
        if not self.product_service.exists(product_id):
            raise ProductNotFound(product_id)

        deleted, _ = WishListEntry.objects.filter(member_id=member_id, product_id=product_id).delete()
        return deleted > 0
