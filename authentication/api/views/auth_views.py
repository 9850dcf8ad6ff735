import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from authentication.api.serializers import AuthErrorSerializer, MemberCredentialsSerializer, TokenSerializer
from authentication.domain.services import AuthService
from infrastructure.container import container
from utils.logging_utils import sanitize_payload

logger = logging.getLogger(__name__)


class LoginViewSet(viewsets.ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get_service(self) -> AuthService:
        return container.auth_service()

    @extend_schema(
        operation_id="login",
        summary="Log in with email and password",
        request=MemberCredentialsSerializer,
        responses={
            200: OpenApiResponse(response=TokenSerializer, description="Login successful"),
            400: OpenApiResponse(description="Invalid request body"),
            401: OpenApiResponse(response=AuthErrorSerializer, description="Invalid credentials"),
        },
        tags=["Authentication"],
    )
    def create(self, request):
        logger.debug("Login request: %s", sanitize_payload(request.data, ["email"]))
        serializer = MemberCredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().login(
            serializer.validated_data["email"], serializer.validated_data["password"], request=request
        )
        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_401_UNAUTHORIZED)

        return Response({"token": result.access_token, "refresh": result.refresh_token}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="signup",
        summary="Register a new member",
        request=MemberCredentialsSerializer,
        responses={
            200: OpenApiResponse(response=TokenSerializer, description="Member created"),
            400: OpenApiResponse(response=AuthErrorSerializer, description="Invalid data or email taken"),
        },
        tags=["Authentication"],
    )
    def signup(self, request):
        logger.debug("Signup request: %s", sanitize_payload(request.data, ["email"]))
        serializer = MemberCredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().signup(serializer.validated_data["email"], serializer.validated_data["password"])
        if not result.success:
            return Response({"detail": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"token": result.access_token, "refresh": result.refresh_token}, status=status.HTTP_200_OK)
