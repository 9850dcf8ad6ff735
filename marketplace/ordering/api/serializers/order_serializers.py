from rest_framework import serializers

from marketplace.api.serializers import PageQuerySerializer
from marketplace.models import Order


class OrderCreateSerializer(serializers.Serializer):
    option_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=100_000_000, default=1)
    message = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class OrderSerializer(serializers.ModelSerializer):
    option_id = serializers.IntegerField(source="product_option_id", read_only=True)
    option_name = serializers.CharField(source="product_option.name", read_only=True)
    product_id = serializers.IntegerField(source="product_option.product_id", read_only=True)
    product_name = serializers.CharField(source="product_option.product.name", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "option_id",
            "option_name",
            "product_id",
            "product_name",
            "quantity",
            "message",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderListQuerySerializer(PageQuerySerializer):
    pass
