"""
Mapping between wishlist rows and the transport objects returned by the API.

Transport objects are frozen dataclasses; they never hold a model instance,
so serializing them cannot trigger lazy queries.
"""

from dataclasses import dataclass

from marketplace.wishlist.domain.models import WishListEntry


@dataclass(frozen=True)
class MemberTransport:
    id: int
    email: str


@dataclass(frozen=True)
class ProductTransport:
    id: int
    name: str
    price: int
    image_url: str


@dataclass(frozen=True)
class WishListTransport:
    id: int
    member: MemberTransport
    product: ProductTransport

    def product_transport(self) -> ProductTransport:
        return self.product


class WishListMapper:
    def to_entity(self, product_id: int, member) -> WishListEntry:
        """Build an unsaved entry linking member to product_id."""
        return WishListEntry(member=member, product_id=product_id)

    def to_product_transport(self, product) -> ProductTransport:
        return ProductTransport(id=product.id, name=product.name, price=product.price, image_url=product.image_url)

    def to_transport(self, entry: WishListEntry) -> WishListTransport:
        member = entry.member
        return WishListTransport(
            id=entry.id,
            member=MemberTransport(id=member.id, email=member.email),
            product=self.to_product_transport(entry.product),
        )
