from rest_framework import status
from rest_framework.response import Response

from marketplace.services import ReferenceNotFound, ServiceError


def service_error_response(error: ServiceError) -> Response:
    """Translate a domain error into the API's error body."""
    if isinstance(error, ReferenceNotFound):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return Response({"error": error.error_code, "detail": error.detail}, status=status_code)
