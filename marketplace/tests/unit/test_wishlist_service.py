from unittest.mock import MagicMock, patch

import pytest

from marketplace.models import Product, WishListEntry
from marketplace.services import ProductNotFound, ProductService, WishListService
from marketplace.wishlist.domain.mappers import ProductTransport, WishListMapper


@pytest.fixture
def product_service():
    return MagicMock(spec=ProductService)


@pytest.fixture
def mapper():
    return MagicMock(spec=WishListMapper)


@pytest.fixture
def wishlist_service(product_service, mapper):
    return WishListService(product_service=product_service, mapper=mapper)


@pytest.fixture
def transport():
    return ProductTransport(id=1, name="Mug", price=1200, image_url="https://cdn.example.com/mug.jpg")


@pytest.mark.unit
class TestWishListService:
    @pytest.mark.django_db
    def test_add_wishlist_success(self, wishlist_service, product_service, mapper, transport):
        product_service.exists.return_value = True
        entry = MagicMock(spec=WishListEntry, id=7)
        mapper.to_entity.return_value = entry
        product = MagicMock(spec=Product)
        product_service.get_entity.return_value = product
        mapper.to_transport.return_value.product_transport.return_value = transport
        member = MagicMock(id=3)

        result = wishlist_service.add_wishlist(1, member)

        assert result == transport
        mapper.to_entity.assert_called_once_with(1, member)
        entry.save.assert_called_once()
        product_service.get_entity.assert_called_once_with(1, for_update=True)
        product.wishlist_entries.add.assert_called_once_with(entry)
        product_service.update_entity.assert_called_once_with(1, product)
        mapper.to_transport.assert_called_once_with(entry)

    @pytest.mark.django_db
    def test_add_wishlist_product_not_found(self, wishlist_service, product_service, mapper):
        product_service.exists.return_value = False

        with pytest.raises(ProductNotFound) as exc_info:
            wishlist_service.add_wishlist(99, MagicMock(id=3))

        assert exc_info.value.product_id == 99
        mapper.to_entity.assert_not_called()
        product_service.get_entity.assert_not_called()
        product_service.update_entity.assert_not_called()

    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_get_wishlists_by_member_maps_every_entry(self, mock_entry_model, wishlist_service, mapper, transport):
        entries = [MagicMock(spec=WishListEntry), MagicMock(spec=WishListEntry)]
        queryset = mock_entry_model.objects.filter.return_value.select_related.return_value
        queryset.order_by.return_value = entries
        mapper.to_transport.return_value.product_transport.return_value = transport

        result = wishlist_service.get_wishlists_by_member(5)

        assert result == [transport, transport]
        mock_entry_model.objects.filter.assert_called_once_with(member_id=5)
        queryset.order_by.assert_called_once_with("id")

    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_get_wishlists_by_member_unknown_member_is_empty(self, mock_entry_model, wishlist_service, mapper):
        queryset = mock_entry_model.objects.filter.return_value.select_related.return_value
        queryset.order_by.return_value = []

        assert wishlist_service.get_wishlists_by_member(12345) == []
        mapper.to_transport.assert_not_called()

    @patch("marketplace.services.wishlist_service.paginate")
    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_get_wishlists_by_member_paged_applies_sort(self, mock_entry_model, mock_paginate, wishlist_service):
        mock_paginate.return_value = []
        queryset = mock_entry_model.objects.filter.return_value.select_related.return_value

        wishlist_service.get_wishlists_by_member_paged(5, page=1, page_size=2, sort=["-product__price"])

        queryset.order_by.assert_called_once_with("-product__price", "id")
        mock_paginate.assert_called_once_with(queryset.order_by.return_value, 1, 2)

    def test_get_wishlists_by_member_paged_rejects_unknown_sort(self, wishlist_service):
        with pytest.raises(ValueError):
            wishlist_service.get_wishlists_by_member_paged(5, sort=["member__password"])

    @pytest.mark.django_db
    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_delete_wishlists_by_member(self, mock_entry_model, wishlist_service):
        mock_entry_model.objects.filter.return_value.delete.return_value = (3, {"marketplace.WishListEntry": 3})

        assert wishlist_service.delete_wishlists_by_member(5) is True
        mock_entry_model.objects.filter.assert_called_once_with(member_id=5)

    @pytest.mark.django_db
    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_delete_wishlists_by_member_nothing_to_delete(self, mock_entry_model, wishlist_service):
        mock_entry_model.objects.filter.return_value.delete.return_value = (0, {})

        assert wishlist_service.delete_wishlists_by_member(5) is False

    @pytest.mark.django_db
    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_delete_wishlist_success(self, mock_entry_model, wishlist_service, product_service):
        product_service.exists.return_value = True
        mock_entry_model.objects.filter.return_value.delete.return_value = (1, {"marketplace.WishListEntry": 1})

        assert wishlist_service.delete_wishlist(1, 5) is True
        mock_entry_model.objects.filter.assert_called_once_with(member_id=5, product_id=1)

    @pytest.mark.django_db
    @patch("marketplace.services.wishlist_service.WishListEntry")
    def test_delete_wishlist_product_not_found(self, mock_entry_model, wishlist_service, product_service):
        product_service.exists.return_value = False

        with pytest.raises(ProductNotFound):
            wishlist_service.delete_wishlist(1, 5)

        mock_entry_model.objects.filter.assert_not_called()
