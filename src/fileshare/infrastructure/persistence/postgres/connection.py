"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False; PoolLifespanMiddleware opens it on ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
        name="fileshare",
    )


async def ping(pool: AsyncConnectionPool, timeout: float = 2.0) -> bool:
    """Return True if a pooled connection answers a trivial query."""
    async with pool.connection(timeout=timeout) as conn:
        await conn.execute("SELECT 1")
    return True
