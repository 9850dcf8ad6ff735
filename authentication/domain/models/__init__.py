from authentication.domain.models.member import Member, MemberManager


__all__ = [
    "Member",
    "MemberManager",
]
