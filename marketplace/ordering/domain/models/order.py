from django.contrib.auth import get_user_model
from django.db import models
from django.utils import timezone

from marketplace.catalog.domain.models.catalog import ProductOption

User = get_user_model()


class Order(models.Model):
    member = models.ForeignKey(User, on_delete=models.CASCADE, related_name="orders")
    product_option = models.ForeignKey(ProductOption, on_delete=models.CASCADE, related_name="orders")

    quantity = models.PositiveIntegerField(default=1)
    message = models.CharField(max_length=255, blank=True)

    # Stamped by the service layer at the write boundary, see stamp_created()
    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField()

    class Meta:
        db_table = "order"
        ordering = ["-created_at", "-id"]
        app_label = "marketplace"

    def stamp_created(self, now=None):
        """Set both timestamps for a row that is about to be inserted."""
        now = now or timezone.now()
        self.created_at = now
        self.updated_at = now

    def touch(self, now=None):
        """Refresh updated_at before saving a change to an existing row."""
        self.updated_at = now or timezone.now()

    def __str__(self):
        return f"Order {self.id} for {self.quantity}x {self.product_option}"
