from rest_framework import serializers


class MemberCredentialsSerializer(serializers.Serializer):
    """Email/password pair used by both login and signup."""

    email = serializers.EmailField(max_length=150)
    password = serializers.CharField(write_only=True, min_length=4, max_length=128, trim_whitespace=False)


class TokenSerializer(serializers.Serializer):
    token = serializers.CharField(read_only=True, help_text="JWT access token")
    refresh = serializers.CharField(read_only=True, help_text="JWT refresh token")


class AuthErrorSerializer(serializers.Serializer):
    detail = serializers.CharField(help_text="Why the request was rejected")
