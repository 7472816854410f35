"""Pytest fixtures for fileshare tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from fileshare.application.services.access_guard import AccessGuard
from fileshare.domain.entities import PermissionGrant, Resource
from fileshare.domain.exceptions import StoreUnavailable
from fileshare.domain.value_objects import PermissionLevel
from fileshare.infrastructure.permission.permission_evaluator import StorePermissionEvaluator


# --- Fake repositories ---


class FakeResourceRepository:
    """In-memory resource repository."""

    def __init__(self, grants: FakeGrantRepository) -> None:
        self._by_id: dict[UUID, Resource] = {}
        self._grants = grants

    async def find_owner(self, resource_id: UUID) -> str | None:
        resource = self._by_id.get(resource_id)
        return resource.owner_id if resource else None

    async def get_by_id(self, resource_id: UUID) -> Resource | None:
        resource = self._by_id.get(resource_id)
        return replace(resource) if resource else None

    async def list_visible_to(
        self,
        principal_id: str,
        *,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]:
        items = [
            r
            for r in self._by_id.values()
            if r.owner_id == principal_id or (r.id, principal_id) in self._grants._rows
        ]
        items.sort(key=lambda r: r.id)
        if cursor:
            cursor_uuid = UUID(cursor)
            items = [r for r in items if r.id > cursor_uuid]
        page = items[: limit + 1]
        next_cursor = str(page[limit - 1].id) if len(page) > limit else None
        return (page[:limit], next_cursor)

    async def create(self, resource: Resource) -> Resource:
        self._by_id[resource.id] = replace(resource)
        return resource

    async def update(self, resource: Resource) -> None:
        existing = self._by_id[resource.id]
        self._by_id[resource.id] = replace(resource, owner_id=existing.owner_id)

    async def delete(self, resource_id: UUID) -> None:
        self._by_id.pop(resource_id, None)


class FakeGrantRepository:
    """In-memory grant repository keyed by (resource_id, principal_id)."""

    def __init__(self) -> None:
        self._rows: dict[tuple[UUID, str], PermissionGrant] = {}

    async def find_grant(self, resource_id: UUID, principal_id: str) -> PermissionLevel | None:
        grant = self._rows.get((resource_id, principal_id))
        return grant.level if grant else None

    async def list_by_resource(self, resource_id: UUID) -> list[PermissionGrant]:
        return sorted(
            (g for (rid, _), g in self._rows.items() if rid == resource_id),
            key=lambda g: g.principal_id,
        )

    async def upsert_grant(self, grant: PermissionGrant) -> PermissionGrant:
        key = (grant.resource_id, grant.principal_id)
        existing = self._rows.get(key)
        if existing:
            grant = replace(existing, level=grant.level, updated_at=grant.updated_at)
        self._rows[key] = grant
        return grant

    async def delete_grant(self, resource_id: UUID, principal_id: str) -> bool:
        return self._rows.pop((resource_id, principal_id), None) is not None

    async def delete_all_grants(self, resource_id: UUID) -> int:
        keys = [k for k in self._rows if k[0] == resource_id]
        for k in keys:
            del self._rows[k]
        return len(keys)


class FakeUnitOfWork:
    """In-memory Unit of Work. State lives on the instance and is shared by every factory call."""

    def __init__(self) -> None:
        self.grants = FakeGrantRepository()
        self.resources = FakeResourceRepository(self.grants)
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass

    def add_resource(self, owner_id: str, resource_id: UUID | None = None, name: str = "report.pdf") -> Resource:
        """Seed a resource synchronously."""
        now = datetime.now(UTC)
        resource = Resource(
            id=resource_id or uuid4(),
            owner_id=owner_id,
            name=name,
            mimetype="application/pdf",
            size=1024,
            created_at=now,
            updated_at=now,
        )
        self.resources._by_id[resource.id] = resource
        return resource

    def add_grant(self, resource_id: UUID, principal_id: str, level: PermissionLevel) -> PermissionGrant:
        """Seed a grant synchronously."""
        now = datetime.now(UTC)
        grant = PermissionGrant(
            resource_id=resource_id,
            principal_id=principal_id,
            level=level,
            created_at=now,
            updated_at=now,
            created_by="seed",
        )
        self.grants._rows[(resource_id, principal_id)] = grant
        return grant


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call, committing on success."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        await uow.commit()

    return factory


def make_failing_uow_factory():
    """Factory that fails like an unreachable database."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        raise StoreUnavailable("connection refused")
        yield  # pragma: no cover

    return factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def evaluator(uow_factory) -> StorePermissionEvaluator:
    """Evaluator backed by the in-memory stores."""
    return StorePermissionEvaluator(uow_factory)


@pytest.fixture
def access_guard(evaluator: StorePermissionEvaluator) -> AccessGuard:
    """AccessGuard over the in-memory evaluator."""
    return AccessGuard(evaluator)


@pytest.fixture
def owner_resource(fake_uow: FakeUnitOfWork) -> Resource:
    """Resource R1 owned by user-1."""
    return fake_uow.add_resource("user-1")
