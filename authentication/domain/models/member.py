from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class MemberManager(UserManager):
    """Manager that treats the email address as the login identifier."""

    def get_by_natural_key(self, username):
        # Login matches the email regardless of case
        return self.get(**{f"{self.model.USERNAME_FIELD}__iexact": username})

    def create_member(self, email, password=None, **extra_fields):
        email = self.normalize_email(email).lower()
        extra_fields.setdefault("username", email)
        return self.create_user(email=email, password=password, **extra_fields)


class Member(AbstractUser):
    email = models.EmailField(unique=True)
    date_joined = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    objects = MemberManager()

    class Meta:
        verbose_name = "Member"
        verbose_name_plural = "Members"
        app_label = "authentication"

    def __str__(self):
        return self.email
