from .outputs import CastMemberOutput
from .use_cases import (
    CreateCastMemberInput,
    CreateCastMemberUseCase,
    DeleteCastMemberInput,
    DeleteCastMemberUseCase,
    GetCastMemberInput,
    GetCastMemberUseCase,
    ListCastMembersInput,
    ListCastMembersUseCase,
    UpdateCastMemberInput,
    UpdateCastMemberUseCase,
)
from .validators import CastMembersIdExistsInDatabaseValidator

__all__ = [
    "CastMemberOutput",
    "CastMembersIdExistsInDatabaseValidator",
    "CreateCastMemberInput",
    "CreateCastMemberUseCase",
    "DeleteCastMemberInput",
    "DeleteCastMemberUseCase",
    "GetCastMemberInput",
    "GetCastMemberUseCase",
    "ListCastMembersInput",
    "ListCastMembersUseCase",
    "UpdateCastMemberInput",
    "UpdateCastMemberUseCase",
]
