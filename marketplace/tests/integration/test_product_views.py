from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Product, ProductOption
from marketplace.tests.factories import MemberFactory, ProductFactory, ProductOptionFactory


class ProductViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.member = MemberFactory()
        self.list_url = reverse("marketplace:product-list")

    def detail_url(self, product_id):
        return reverse("marketplace:product-detail", kwargs={"pk": product_id})

    def options_url(self, product_id):
        return reverse("marketplace:product-options", kwargs={"pk": product_id})

    def test_list_is_public_and_paged(self):
        cheap = ProductFactory(price=100)
        mid = ProductFactory(price=200)
        dear = ProductFactory(price=300)

        first = self.client.get(self.list_url, {"page": 0, "size": 2, "sort": "-price"})
        second = self.client.get(self.list_url, {"page": 1, "size": 2, "sort": "-price"})

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in first.data], [dear.id, mid.id])
        self.assertEqual([p["id"] for p in second.data], [cheap.id])

    def test_retrieve_includes_options(self):
        option = ProductOptionFactory(name="Blue")

        response = self.client.get(self.detail_url(option.product_id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([o["name"] for o in response.data["options"]], ["Blue"])

    def test_retrieve_missing_product_is_404(self):
        response = self.client.get(self.detail_url(987654))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "product_not_found")

    def test_create_requires_authentication(self):
        response = self.client.post(self.list_url, {"name": "Teddy", "price": 2500}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_with_options(self):
        self.client.force_authenticate(user=self.member)

        response = self.client.post(
            self.list_url,
            {"name": "Teddy", "price": 2500, "options": [{"name": "Brown", "quantity": 4}]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        product = Product.objects.get(id=response.data["id"])
        self.assertEqual(product.name, "Teddy")
        self.assertEqual(list(product.options.values_list("name", flat=True)), ["Brown"])

    def test_create_with_duplicate_option_names_is_400(self):
        self.client.force_authenticate(user=self.member)

        response = self.client.post(
            self.list_url,
            {"name": "Teddy", "price": 2500, "options": [{"name": "Red"}, {"name": "Red"}]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "duplicate_option_name")
        self.assertFalse(Product.objects.exists())

    def test_create_negative_price_is_400(self):
        self.client.force_authenticate(user=self.member)

        response = self.client.post(self.list_url, {"name": "Teddy", "price": -1}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_partial_update(self):
        self.client.force_authenticate(user=self.member)
        product = ProductFactory(name="Old", price=100)

        response = self.client.patch(self.detail_url(product.id), {"name": "New"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertEqual(product.name, "New")
        self.assertEqual(product.price, 100)

    def test_update_missing_product_is_404(self):
        self.client.force_authenticate(user=self.member)

        response = self.client.put(self.detail_url(987654), {"name": "New", "price": 100}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_destroy(self):
        self.client.force_authenticate(user=self.member)
        product = ProductFactory()

        response = self.client.delete(self.detail_url(product.id))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(id=product.id).exists())

    def test_options_list_and_add(self):
        product = ProductFactory()
        self.client.force_authenticate(user=self.member)

        created = self.client.post(self.options_url(product.id), {"name": "Gift wrap", "quantity": 7}, format="json")
        listing = self.client.get(self.options_url(product.id))

        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["quantity"], 7)
        self.assertEqual([o["name"] for o in listing.data], ["Gift wrap"])

    def test_options_duplicate_name_is_400(self):
        option = ProductOptionFactory(name="Gift wrap")
        self.client.force_authenticate(user=self.member)

        response = self.client.post(self.options_url(option.product_id), {"name": "Gift wrap"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(ProductOption.objects.filter(product_id=option.product_id).count(), 1)

    def test_options_for_missing_product_is_404(self):
        response = self.client.get(self.options_url(987654))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
