from django.contrib import admin

from .models import Order, Product, ProductOption, WishListEntry


class ProductOptionInline(admin.TabularInline):
    model = ProductOption
    extra = 1


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "price", "created_at"]
    search_fields = ["name"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [ProductOptionInline]


@admin.register(WishListEntry)
class WishListEntryAdmin(admin.ModelAdmin):
    list_display = ["id", "member", "product"]
    list_filter = ["product"]
    search_fields = ["member__email", "product__name"]
    raw_id_fields = ["member", "product"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "member", "product_option", "quantity", "created_at"]
    search_fields = ["member__email", "product_option__product__name"]
    readonly_fields = ["created_at", "updated_at"]
    raw_id_fields = ["member", "product_option"]

    def save_model(self, request, obj, form, change):
        if change:
            obj.touch()
        else:
            obj.stamp_created()
        super().save_model(request, obj, form, change)
