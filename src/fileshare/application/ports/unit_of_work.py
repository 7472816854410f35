"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from fileshare.application.ports.repositories.grant_repository import GrantRepository
from fileshare.application.ports.repositories.resource_repository import (
    ResourceRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def resources(self) -> ResourceRepository: ...

    @property
    def grants(self) -> GrantRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
