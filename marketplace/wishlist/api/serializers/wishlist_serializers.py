from rest_framework import serializers

from marketplace.api.serializers import PageQuerySerializer


class WishListAddSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)


class WishListQuerySerializer(PageQuerySerializer):
    """Without `page` the whole wishlist is returned."""

    SORT_FIELDS = {"id": "id", "name": "product__name", "price": "product__price"}

    page = serializers.IntegerField(min_value=0, required=False, help_text="Zero-based page; omit for everything")
