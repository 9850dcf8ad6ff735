from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.errors import service_error_response
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.ordering.api.serializers import OrderCreateSerializer, OrderListQuerySerializer, OrderSerializer
from marketplace.services import OrderService, ServiceError


class OrderViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r"\d+"

    def get_service(self) -> OrderService:
        return container.order_service()

    @extend_schema(
        operation_id="orders_list",
        summary="List the caller's orders, newest first",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Zero-based page number (default: 0)"),
            OpenApiParameter(name="size", type=int, description="Items per page (default: 20)"),
        ],
        responses={200: OrderSerializer(many=True)},
        tags=["Orders"],
    )
    def list(self, request):
        query = OrderListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        orders = self.get_service().list_orders(request.user, query.validated_data["page"], query.validated_data["size"])
        return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="orders_create",
        summary="Place an order for a product option",
        description="""
        **What it receives:**
        - `option_id` (integer): Product option to buy
        - `quantity` (integer, optional): Units to buy (default: 1)
        - `message` (string, optional): Note attached to the order

        **What it returns:**
        - The created order with its timestamps
        """,
        request=OrderCreateSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data or insufficient stock"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product option not found"),
        },
        tags=["Orders"],
    )
    def create(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = self.get_service().place_order(
                request.user,
                serializer.validated_data["option_id"],
                quantity=serializer.validated_data["quantity"],
                message=serializer.validated_data["message"],
            )
        except ServiceError as e:
            return service_error_response(e)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="orders_retrieve",
        summary="Get one of the caller's orders",
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Orders"],
    )
    def retrieve(self, request, pk=None):
        try:
            order = self.get_service().get_order(request.user, int(pk))
        except ServiceError as e:
            return service_error_response(e)
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)
