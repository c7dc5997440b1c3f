"""Pytest fixtures for ResAccess tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from resaccess.domain.entities import AccessPolicy, AuthenticatedIdentity, Profile, Resource
from resaccess.domain.services import FilterExpression, matches
from resaccess.domain.value_objects import PermissionModifier


# --- Fake repositories ---


class FakeResourceRepository:
    """In-memory resource repository. Evaluates filters with ``matches``."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Resource] = {}
        self.last_conditions: FilterExpression | None = None

    async def get_by_id(self, resource_id: UUID) -> Resource | None:
        return self._by_id.get(resource_id)

    def _filtered(self, conditions: FilterExpression | None) -> list[Resource]:
        self.last_conditions = conditions
        items = list(self._by_id.values())
        if conditions is not None:
            items = [r for r in items if matches(conditions, r.policy)]
        items.sort(key=lambda r: r.id)
        return items

    async def list(
        self,
        *,
        conditions: FilterExpression | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[Resource], str | None]:
        items = self._filtered(conditions)
        if cursor:
            cursor_uuid = UUID(cursor)
            items = [r for r in items if r.id > cursor_uuid]
        page = items[: limit + 1]
        next_cursor = str(page[limit - 1].id) if len(page) > limit else None
        return (page[:limit], next_cursor)

    async def count(self, *, conditions: FilterExpression | None = None) -> int:
        return len(self._filtered(conditions))

    async def create(self, resource: Resource) -> Resource:
        self._by_id[resource.id] = resource
        return resource

    async def update(self, resource: Resource) -> None:
        self._by_id[resource.id] = resource

    async def delete(self, resource_id: UUID) -> None:
        self._by_id.pop(resource_id, None)

    def add(self, resource: Resource) -> Resource:
        """Helper to store a resource for tests."""
        self._by_id[resource.id] = resource
        return resource


class FakeProfileRepository:
    """In-memory profile repository."""

    def __init__(self) -> None:
        self._by_username: dict[str, Profile] = {}

    async def get_by_username(self, username: str) -> Profile | None:
        return self._by_username.get(username)

    def add_profile(self, profile: Profile) -> None:
        """Helper to add profile for tests."""
        self._by_username[profile.username] = profile


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.resources = FakeResourceRepository()
        self.profiles = FakeProfileRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def make_resource(
    owner_id: str | None = "bob",
    group_id: str | None = "staff",
    owner_modifier: PermissionModifier = PermissionModifier.READ_WRITE,
    group_modifier: PermissionModifier = PermissionModifier.READ,
    all_modifier: PermissionModifier = PermissionModifier.NONE,
    name: str = "report",
) -> Resource:
    """Build a resource with the given policy."""
    now = datetime.now(UTC)
    return Resource(
        id=uuid4(),
        name=name,
        content="",
        policy=AccessPolicy(
            owner_id=owner_id,
            group_id=group_id,
            owner_modifier=owner_modifier,
            group_modifier=group_modifier,
            all_modifier=all_modifier,
        ),
        created_at=now,
        updated_at=now,
    )


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
def bob() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(profile_id="bob", member_group_ids=frozenset({"user"}))


@pytest.fixture
def carol() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(profile_id="carol", member_group_ids=frozenset({"staff"}))


@pytest.fixture
def dave() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(profile_id="dave")


@pytest.fixture
def admin() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(profile_id="admin", is_superuser=True)
