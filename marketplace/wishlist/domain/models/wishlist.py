from django.contrib.auth import get_user_model
from django.db import models

from marketplace.catalog.domain.models.catalog import Product


User = get_user_model()


class WishListEntry(models.Model):
    """One member wishing for one product. Duplicate pairs are allowed."""

    member = models.ForeignKey(User, on_delete=models.CASCADE, related_name="wishlist_entries")
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="wishlist_entries")

    class Meta:
        db_table = "wishlist"
        ordering = ["id"]
        app_label = "marketplace"
        verbose_name = "Wishlist entry"
        verbose_name_plural = "Wishlist entries"
        indexes = [
            models.Index(fields=["member", "product"], name="wishlist_member_product_idx"),  # For pair deletes
        ]

    def __str__(self):
        return f"{self.member} wishes for {self.product.name}"
