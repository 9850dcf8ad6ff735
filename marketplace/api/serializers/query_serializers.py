from django.conf import settings
from rest_framework import serializers


class PageQuerySerializer(serializers.Serializer):
    """
    Query parameters shared by paged list endpoints.

    `sort` is a comma-separated list of public field names, each optionally
    prefixed with "-" for descending order. Subclasses map public names to
    order-by paths through SORT_FIELDS.
    """

    SORT_FIELDS = {"id": "id"}

    page = serializers.IntegerField(min_value=0, default=0, help_text="Zero-based page number")
    size = serializers.IntegerField(min_value=1, required=False, help_text="Items per page")
    sort = serializers.CharField(required=False, allow_blank=True, help_text='e.g. "-price,name"')

    def validate_size(self, value):
        if value > settings.MAX_PAGE_SIZE:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {settings.MAX_PAGE_SIZE}.")
        return value

    def validate_sort(self, value):
        ordering = []
        for token in (part.strip() for part in value.split(",")):
            if not token:
                continue
            descending = token.startswith("-")
            name = token.lstrip("-")
            if name not in self.SORT_FIELDS:
                raise serializers.ValidationError(
                    f"Unknown sort field '{name}'. Choose from: {', '.join(sorted(self.SORT_FIELDS))}"
                )
            ordering.append(("-" if descending else "") + self.SORT_FIELDS[name])
        return ordering

    def validate(self, attrs):
        attrs.setdefault("size", settings.DEFAULT_PAGE_SIZE)
        attrs.setdefault("sort", [])
        return attrs
