from .query_serializers import PageQuerySerializer
from .response_serializers import DeleteResultSerializer, ErrorResponseSerializer


__all__ = [
    "DeleteResultSerializer",
    "ErrorResponseSerializer",
    "PageQuerySerializer",
]
