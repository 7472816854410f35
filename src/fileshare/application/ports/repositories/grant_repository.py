"""Grant repository port."""

from typing import Protocol
from uuid import UUID

from fileshare.domain.entities import PermissionGrant
from fileshare.domain.value_objects import PermissionLevel


class GrantRepository(Protocol):
    """Port for permission grant persistence.

    upsert_grant and delete_grant must each be a single atomic statement so a
    concurrent reader sees either the old or the new row for the pair.
    """

    async def find_grant(self, resource_id: UUID, principal_id: str) -> PermissionLevel | None: ...

    async def list_by_resource(self, resource_id: UUID) -> list[PermissionGrant]: ...

    async def upsert_grant(self, grant: PermissionGrant) -> PermissionGrant: ...

    async def delete_grant(self, resource_id: UUID, principal_id: str) -> bool: ...

    async def delete_all_grants(self, resource_id: UUID) -> int: ...
