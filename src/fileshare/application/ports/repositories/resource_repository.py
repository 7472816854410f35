"""Resource repository port."""

from typing import Protocol
from uuid import UUID

from fileshare.domain.entities import Resource


class ResourceRepository(Protocol):
    """Port for resource persistence."""

    async def find_owner(self, resource_id: UUID) -> str | None: ...

    async def get_by_id(self, resource_id: UUID) -> Resource | None: ...

    async def list_visible_to(
        self,
        principal_id: str,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]: ...

    async def create(self, resource: Resource) -> Resource: ...

    async def update(self, resource: Resource) -> None: ...

    async def delete(self, resource_id: UUID) -> None: ...
