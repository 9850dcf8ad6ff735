from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.errors import service_error_response
from marketplace.api.serializers import DeleteResultSerializer, ErrorResponseSerializer
from marketplace.catalog.api.serializers import ProductTransportSerializer
from marketplace.services import ServiceError, WishListService
from marketplace.wishlist.api.serializers import WishListAddSerializer, WishListQuerySerializer


class WishListViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def get_service(self) -> WishListService:
        return container.wishlist_service()

    @extend_schema(
        operation_id="wishlist_list",
        summary="List the caller's wishlisted products",
        description="""
        **What it receives:**
        - Authentication token (header)
        - Optional `page`, `size`, `sort` query params; without `page` everything is returned

        **What it returns:**
        - Wishlisted products in insertion order unless `sort` says otherwise
        """,
        parameters=[
            OpenApiParameter(name="page", type=int, description="Zero-based page number"),
            OpenApiParameter(name="size", type=int, description="Items per page (default: 20)"),
            OpenApiParameter(name="sort", type=str, description="id, name or price; '-' for descending"),
        ],
        responses={200: ProductTransportSerializer(many=True)},
        tags=["Wishlist"],
    )
    def list(self, request):
        query = WishListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        service = self.get_service()
        page = query.validated_data.get("page")
        if page is None:
            products = service.get_wishlists_by_member(request.user.id)
        else:
            products = service.get_wishlists_by_member_paged(
                request.user.id, page, query.validated_data["size"], query.validated_data["sort"]
            )
        return Response(ProductTransportSerializer(products, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="wishlist_add",
        summary="Add a product to the caller's wishlist",
        request=WishListAddSerializer,
        responses={
            201: ProductTransportSerializer,
            400: OpenApiResponse(description="Invalid product_id"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Wishlist"],
    )
    def create(self, request):
        serializer = WishListAddSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self.get_service().add_wishlist(serializer.validated_data["product_id"], request.user)
        except ServiceError as e:
            return service_error_response(e)
        return Response(ProductTransportSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="wishlist_clear",
        summary="Remove every product from the caller's wishlist",
        responses={200: DeleteResultSerializer},
        tags=["Wishlist"],
    )
    def clear(self, request):
        deleted = self.get_service().delete_wishlists_by_member(request.user.id)
        return Response({"deleted": deleted}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="wishlist_remove",
        summary="Remove one product from the caller's wishlist",
        responses={
            200: DeleteResultSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Wishlist"],
    )
    def destroy(self, request, product_id=None):
        try:
            deleted = self.get_service().delete_wishlist(int(product_id), request.user.id)
        except ServiceError as e:
            return service_error_response(e)
        return Response({"deleted": deleted}, status=status.HTTP_200_OK)
