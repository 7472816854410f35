"""List resources use case."""

from fileshare.domain.entities import Resource


class ListResourcesUseCase:
    """List resources the principal owns or holds a grant on."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        principal_id: str,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]:
        """Return one page of visible resources and the next cursor."""
        limit = min(max(limit, 1), 100)
        async with self._uow_factory() as uow:
            return await uow.resources.list_visible_to(
                principal_id, cursor=cursor, limit=limit
            )
