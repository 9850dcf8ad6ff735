from rest_framework_simplejwt.tokens import RefreshToken


class MemberRefreshToken(RefreshToken):
    """Refresh token that also carries the member email as a claim"""

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token["email"] = user.email
        return token
