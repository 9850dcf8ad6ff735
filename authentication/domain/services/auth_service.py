"""
AuthService - member signup and login.

Password hashing and token issuance are delegated to Django's auth framework
and simplejwt; this service only sequences them.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from authentication.api.serializers.jwt_serializers import MemberRefreshToken
from utils.logging_utils import mask_email

from .results import LoginResult, RegisterResult


Member = get_user_model()
logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for members.

    Handles signup (create member + issue tokens) and login
    (verify credentials + issue tokens).
    """

    def login(self, email: str, password: str, request=None) -> LoginResult:
        """
        Authenticate a member with email/password.

        Args:
            email: Member email address
            password: Raw password
            request: Optional Django request passed to the auth backends

        Returns:
            LoginResult with tokens on success
        """
        if not email or not password:
            return LoginResult(success=False, error="Email and password are required.")

        member = authenticate(request, email=Member.objects.normalize_email(email), password=password)
        if member is None:
            logger.info("Login failed for %s", mask_email(email))
            return LoginResult(success=False, error="Invalid email or password.")

        refresh = MemberRefreshToken.for_user(member)
        logger.info("Member %s logged in", member.id)
        return LoginResult(
            success=True,
            member=member,
            access_token=str(refresh.access_token),
            refresh_token=str(refresh),
        )

    def signup(self, email: str, password: str) -> RegisterResult:
        """
        Create a new member and issue tokens for it.

        Args:
            email: Email address, unique across members
            password: Raw password, hashed before it is stored

        Returns:
            RegisterResult with tokens on success
        """
        email = Member.objects.normalize_email(email).lower()
        if Member.objects.filter(email__iexact=email).exists():
            return RegisterResult(success=False, error="A member with this email already exists.")

        try:
            with transaction.atomic():
                member = Member.objects.create_member(email=email, password=password)
        except IntegrityError:
            # Lost a race with a concurrent signup for the same address
            logger.warning("Concurrent signup for %s", mask_email(email))
            return RegisterResult(success=False, error="A member with this email already exists.")

        refresh = MemberRefreshToken.for_user(member)
        logger.info("Member %s signed up", member.id)
        return RegisterResult(
            success=True,
            member=member,
            access_token=str(refresh.access_token),
            refresh_token=str(refresh),
        )
