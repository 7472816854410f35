"""PostgreSQL grant repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from fileshare.domain.entities import PermissionGrant
from fileshare.domain.value_objects import PermissionLevel

_COLUMNS = "resource_id, principal_id, level, created_at, updated_at, created_by"


def _row_to_grant(r: tuple) -> PermissionGrant:
    return PermissionGrant(
        resource_id=r[0],
        principal_id=r[1],
        level=PermissionLevel(r[2]),
        created_at=r[3],
        updated_at=r[4],
        created_by=r[5],
    )


class PostgresGrantRepository:
    """Grant repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_grant(self, resource_id: UUID, principal_id: str) -> PermissionLevel | None:
        """Get granted level for principal on resource."""
        cur = await self._conn.execute(
            "SELECT level FROM permission_grant WHERE resource_id = %s AND principal_id = %s",
            (resource_id, principal_id),
        )
        r = await cur.fetchone()
        return PermissionLevel(r[0]) if r else None

    async def list_by_resource(self, resource_id: UUID) -> list[PermissionGrant]:
        """List grants on resource."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_grant WHERE resource_id = %s ORDER BY principal_id",
            (resource_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def upsert_grant(self, grant: PermissionGrant) -> PermissionGrant:
        """Insert or replace the grant for (resource, principal) in one statement."""
        cur = await self._conn.execute(
            f"INSERT INTO permission_grant ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (resource_id, principal_id) DO UPDATE "
            "SET level = EXCLUDED.level, updated_at = EXCLUDED.updated_at "
            f"RETURNING {_COLUMNS}",
            (
                grant.resource_id,
                grant.principal_id,
                grant.level.value,
                grant.created_at,
                grant.updated_at,
                grant.created_by,
            ),
        )
        r = await cur.fetchone()
        return _row_to_grant(r)

    async def delete_grant(self, resource_id: UUID, principal_id: str) -> bool:
        """Delete grant, return True if a row was removed."""
        cur = await self._conn.execute(
            "DELETE FROM permission_grant WHERE resource_id = %s AND principal_id = %s",
            (resource_id, principal_id),
        )
        return cur.rowcount > 0

    async def delete_all_grants(self, resource_id: UUID) -> int:
        """Delete every grant on resource, return number of rows removed."""
        cur = await self._conn.execute(
            "DELETE FROM permission_grant WHERE resource_id = %s",
            (resource_id,),
        )
        return cur.rowcount
