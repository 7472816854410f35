"""PostgreSQL resource repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from fileshare.domain.entities import Resource

_COLUMNS = "r.id, r.owner_id, r.name, r.mimetype, r.size, r.created_at, r.updated_at"


def _row_to_resource(r: tuple) -> Resource:
    return Resource(
        id=r[0],
        owner_id=r[1],
        name=r[2],
        mimetype=r[3],
        size=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresResourceRepository:
    """Resource repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_owner(self, resource_id: UUID) -> str | None:
        """Get owner of resource, None if the resource does not exist."""
        cur = await self._conn.execute(
            "SELECT owner_id FROM resource WHERE id = %s",
            (resource_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def get_by_id(self, resource_id: UUID) -> Resource | None:
        """Get resource by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM resource r WHERE r.id = %s",
            (resource_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_resource(r)

    async def list_visible_to(
        self,
        principal_id: str,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]:
        """List resources owned by or granted to principal, with cursor pagination."""
        conditions = [
            "(r.owner_id = %s OR EXISTS ("
            "SELECT 1 FROM permission_grant g WHERE g.resource_id = r.id AND g.principal_id = %s))"
        ]
        _params: list[object] = [principal_id, principal_id]
        if cursor:
            conditions.append("r.id > %s")
            _params.append(UUID(cursor))
        where = " AND ".join(conditions)
        params = tuple(_params) + (limit + 1,)
        q = f"SELECT {_COLUMNS} FROM resource r WHERE {where} ORDER BY r.id LIMIT %s"
        cur = await self._conn.execute(q, params)
        rows = await cur.fetchall()
        resources = [_row_to_resource(r) for r in rows[:limit]]
        next_cursor = str(rows[limit - 1][0]) if len(rows) > limit else None
        return resources, next_cursor

    async def create(self, resource: Resource) -> Resource:
        """Create resource."""
        await self._conn.execute(
            "INSERT INTO resource (id, owner_id, name, mimetype, size, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                resource.id,
                resource.owner_id,
                resource.name,
                resource.mimetype,
                resource.size,
                resource.created_at,
                resource.updated_at,
            ),
        )
        return resource

    async def update(self, resource: Resource) -> None:
        """Update resource metadata. owner_id is never written."""
        await self._conn.execute(
            "UPDATE resource SET name=%s, mimetype=%s, size=%s, updated_at=%s WHERE id=%s",
            (resource.name, resource.mimetype, resource.size, resource.updated_at, resource.id),
        )

    async def delete(self, resource_id: UUID) -> None:
        """Delete resource."""
        await self._conn.execute(
            "DELETE FROM resource WHERE id = %s",
            (resource_id,),
        )
