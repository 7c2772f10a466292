from __future__ import annotations

from catalog_core.application.validators import IdsExistsInDatabaseValidator

from ..domain import CastMember, CastMemberId


class CastMembersIdExistsInDatabaseValidator(IdsExistsInDatabaseValidator[CastMemberId]):
    id_type = CastMemberId
    entity_type = CastMember
