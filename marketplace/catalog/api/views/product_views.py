from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.errors import service_error_response
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import (
    ProductCreateUpdateSerializer,
    ProductDetailSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductOptionInputSerializer,
    ProductOptionSerializer,
)
from marketplace.services import ProductService, ServiceError


class ProductViewSet(viewsets.ViewSet):
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action in ("list", "retrieve") or (self.action == "product_options" and self.request.method == "GET"):
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_service(self) -> ProductService:
        return container.product_service()

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Zero-based page number (default: 0)"),
            OpenApiParameter(name="size", type=int, description="Items per page (default: 20)"),
            OpenApiParameter(name="sort", type=str, description="Comma-separated fields, '-' for descending"),
        ],
        responses={200: ProductListSerializer(many=True)},
        tags=["Products"],
    )
    def list(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        products = self.get_service().list_products(
            page=query.validated_data["page"],
            page_size=query.validated_data["size"],
            sort=query.validated_data["sort"],
        )
        return Response(ProductListSerializer(products, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get a product with its options",
        responses={
            200: ProductDetailSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def retrieve(self, request, pk=None):
        try:
            product = self.get_service().get_entity(int(pk))
        except ServiceError as e:
            return service_error_response(e)
        return Response(ProductDetailSerializer(product).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="products_create",
        summary="Create a product",
        request=ProductCreateUpdateSerializer,
        responses={
            201: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
        },
        tags=["Products"],
    )
    def create(self, request):
        serializer = ProductCreateUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        options = data.pop("options", [])
        try:
            product = self.get_service().create_product(data, options)
        except ServiceError as e:
            return service_error_response(e)
        return Response(ProductDetailSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="products_update",
        summary="Update a product",
        request=ProductCreateUpdateSerializer,
        responses={
            200: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def update(self, request, pk=None):
        return self._update(request, int(pk), partial=False)

    @extend_schema(
        operation_id="products_partial_update",
        summary="Partially update a product",
        request=ProductCreateUpdateSerializer,
        responses={
            200: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def partial_update(self, request, pk=None):
        return self._update(request, int(pk), partial=True)

    def _update(self, request, product_id, partial):
        serializer = ProductCreateUpdateSerializer(data=request.data, partial=partial)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        # Options are managed through the options endpoint
        data.pop("options", None)
        try:
            product = self.get_service().update_product(product_id, data)
        except ServiceError as e:
            return service_error_response(e)
        return Response(ProductDetailSerializer(product).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="products_destroy",
        summary="Delete a product",
        responses={
            204: OpenApiResponse(description="Product deleted"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def destroy(self, request, pk=None):
        try:
            self.get_service().delete_product(int(pk))
        except ServiceError as e:
            return service_error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        operation_id="products_options",
        summary="List or add product options",
        request=ProductOptionInputSerializer,
        responses={
            200: ProductOptionSerializer(many=True),
            201: ProductOptionSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data or duplicate name"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    @action(detail=True, methods=["get", "post"], url_path="options", url_name="options")
    def product_options(self, request, pk=None):
        service = self.get_service()
        if request.method == "GET":
            try:
                options = service.list_options(int(pk))
            except ServiceError as e:
                return service_error_response(e)
            return Response(ProductOptionSerializer(options, many=True).data, status=status.HTTP_200_OK)

        serializer = ProductOptionInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        try:
            option = service.add_option(int(pk), serializer.validated_data["name"], serializer.validated_data["quantity"])
        except ServiceError as e:
            return service_error_response(e)
        return Response(ProductOptionSerializer(option).data, status=status.HTTP_201_CREATED)
