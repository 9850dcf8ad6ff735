from .auth_views import LoginViewSet


__all__ = [
    "LoginViewSet",
]
