from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import OrderViewSet, ProductViewSet, WishListViewSet

# Create the main router
router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="product")
router.register(r"orders", OrderViewSet, basename="order")

app_name = "marketplace"

urlpatterns = [
    # Wishlist routes (manual routing: DELETE on the collection clears it)
    path(
        "wishlist/",
        WishListViewSet.as_view({"get": "list", "post": "create", "delete": "clear"}),
        name="wishlist-list",
    ),
    path(
        "wishlist/<int:product_id>/",
        WishListViewSet.as_view({"delete": "destroy"}),
        name="wishlist-detail",
    ),
    # Main API routes
    path("", include(router.urls)),
]
