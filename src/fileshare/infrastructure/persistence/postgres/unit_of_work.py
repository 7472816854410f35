"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from fileshare.domain.exceptions import StoreUnavailable
from fileshare.infrastructure.persistence.postgres.grant_repository import (
    PostgresGrantRepository,
)
from fileshare.infrastructure.persistence.postgres.resource_repository import (
    PostgresResourceRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._resources = PostgresResourceRepository(self._conn)
        self._grants = PostgresGrantRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def resources(self) -> PostgresResourceRepository:
        return self._resources

    @property
    def grants(self) -> PostgresGrantRepository:
        return self._grants

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Database errors, including pool timeouts, surface as StoreUnavailable.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                yield uow
                await uow.commit()
        except psycopg.Error as exc:
            raise StoreUnavailable(str(exc)) from exc

    return factory
