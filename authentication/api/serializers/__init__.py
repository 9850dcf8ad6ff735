from .auth_serializers import AuthErrorSerializer, MemberCredentialsSerializer, TokenSerializer
from .jwt_serializers import MemberRefreshToken


__all__ = [
    "AuthErrorSerializer",
    "MemberCredentialsSerializer",
    "MemberRefreshToken",
    "TokenSerializer",
]
