from rest_framework import serializers

from marketplace.api.serializers import PageQuerySerializer
from marketplace.models import Product, ProductOption


class ProductOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductOption
        fields = ["id", "name", "quantity"]
        read_only_fields = ["id"]


class ProductOptionInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)
    quantity = serializers.IntegerField(min_value=0, max_value=100_000_000, default=1)


class ProductListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ["id", "name", "price", "image_url", "created_at", "updated_at"]
        read_only_fields = fields


class ProductDetailSerializer(ProductListSerializer):
    options = ProductOptionSerializer(many=True, read_only=True)

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + ["options"]
        read_only_fields = fields


class ProductCreateUpdateSerializer(serializers.Serializer):
    """Input for creating (with options) or updating (without options) a product."""

    name = serializers.CharField(max_length=255)
    price = serializers.IntegerField(min_value=0)
    image_url = serializers.URLField(max_length=2000, required=False, allow_blank=True)
    options = ProductOptionInputSerializer(many=True, required=False)


class ProductTransportSerializer(serializers.Serializer):
    """Renders a ProductTransport dataclass."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)
    image_url = serializers.CharField(read_only=True)


class ProductListQuerySerializer(PageQuerySerializer):
    SORT_FIELDS = {"id": "id", "name": "name", "price": "price", "created_at": "created_at"}
