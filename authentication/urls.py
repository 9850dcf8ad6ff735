from django.urls import path

from authentication.api.views import LoginViewSet

app_name = "authentication"

urlpatterns = [
    path("", LoginViewSet.as_view({"post": "create"}), name="login"),
    path("signup/", LoginViewSet.as_view({"post": "signup"}), name="signup"),
]
