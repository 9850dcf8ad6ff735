from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import MemberFactory, ProductFactory


class LoginViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.login_url = reverse("authentication:login")
        self.signup_url = reverse("authentication:signup")

    def test_signup_returns_token(self):
        response = self.client.post(self.signup_url, {"email": "new@example.com", "password": "secret"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("token", response.data)
        self.assertIn("refresh", response.data)

    def test_signup_duplicate_email(self):
        MemberFactory(email="taken@example.com")

        response = self.client.post(self.signup_url, {"email": "taken@example.com", "password": "secret"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", response.data)

    def test_signup_invalid_email(self):
        response = self.client.post(self.signup_url, {"email": "not-an-email", "password": "secret"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", response.data)

    def test_login_success(self):
        MemberFactory(email="buyer@example.com")

        response = self.client.post(
            self.login_url, {"email": "buyer@example.com", "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("token", response.data)

    def test_login_after_signup_with_different_case(self):
        self.client.post(self.signup_url, {"email": "Alice@Example.com", "password": "secret"}, format="json")

        response = self.client.post(self.login_url, {"email": "alice@example.com", "password": "secret"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("token", response.data)

    def test_login_bad_credentials(self):
        MemberFactory(email="buyer@example.com")

        response = self.client.post(self.login_url, {"email": "buyer@example.com", "password": "wrong"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_token_authorizes_wishlist_requests(self):
        product = ProductFactory()
        signup = self.client.post(self.signup_url, {"email": "new@example.com", "password": "secret"}, format="json")

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {signup.data['token']}")
        added = self.client.post(reverse("marketplace:wishlist-list"), {"product_id": product.id}, format="json")
        listing = self.client.get(reverse("marketplace:wishlist-list"))

        self.assertEqual(added.status_code, status.HTTP_201_CREATED)
        self.assertEqual([p["id"] for p in listing.data], [product.id])

    def test_invalid_token_is_rejected(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = self.client.get(reverse("marketplace:wishlist-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
