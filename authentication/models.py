from authentication.domain.models import Member, MemberManager


__all__ = [
    "Member",
    "MemberManager",
]
