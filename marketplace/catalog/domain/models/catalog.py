from django.db import models


class Product(models.Model):
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    image_url = models.URLField(max_length=2000, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["name"], name="product_name_idx"),
            models.Index(fields=["price"], name="product_price_idx"),
        ]

    def __str__(self):
        return self.name


class ProductOption(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="options")
    name = models.CharField(max_length=50)
    quantity = models.PositiveIntegerField(default=1, help_text="Units available for this option")

    class Meta:
        ordering = ["id"]
        app_label = "marketplace"
        constraints = [
            models.UniqueConstraint(fields=["product", "name"], name="unique_option_name_per_product"),
        ]

    def __str__(self):
        return f"{self.product.name} - {self.name}"
