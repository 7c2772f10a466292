from .domain import CastMember, CastMemberId, CastMemberType
from .repository import CastMemberFilter, CastMemberSearchParams, ICastMemberRepository

__all__ = [
    "CastMember",
    "CastMemberFilter",
    "CastMemberId",
    "CastMemberSearchParams",
    "CastMemberType",
    "ICastMemberRepository",
]
