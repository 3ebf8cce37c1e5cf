"""Pytest fixtures for rolegraph tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

import pytest

from rolegraph.domain.entities import Role, UserRoles


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        return next((r for r in self._by_id.values() if r.name == name), None)

    async def find_by_ids(self, role_ids: list[UUID]) -> list[Role]:
        return [self._by_id[i] for i in dict.fromkeys(role_ids) if i in self._by_id]

    async def list_inheriting(self, role_id: UUID) -> list[Role]:
        return sorted(
            (r for r in self._by_id.values() if role_id in r.inherits),
            key=lambda r: r.name,
        )

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.name)

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = role

    async def delete(self, role_id: UUID) -> None:
        self._by_id.pop(role_id, None)

    def add_role(
        self,
        name: str,
        permissions: Iterable[str] = (),
        inherits: Iterable[UUID] = (),
        role_id: UUID | None = None,
    ) -> Role:
        """Helper to store a role directly, bypassing validation."""
        role = Role(
            id=role_id or uuid4(),
            name=name,
            permissions=frozenset(permissions),
            inherits=list(inherits),
        )
        self._by_id[role.id] = role
        return role


class FakeUserRepository:
    """In-memory user role-membership repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, UserRoles] = {}

    async def get_by_id(self, user_id: str) -> UserRoles | None:
        return self._by_id.get(user_id)

    async def count_assigned(self, role_id: UUID) -> int:
        return sum(1 for u in self._by_id.values() if role_id in u.role_ids)

    def assign(self, user_id: str, *role_ids: UUID) -> UserRoles:
        """Helper to set the roles a user holds."""
        user = UserRoles(user_id=user_id, role_ids=list(role_ids))
        self._by_id[user_id] = user
        return user


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.users = FakeUserRepository()
        self.commits = 0
        self.rollbacks = 0
        self.graph_locks = 0

    async def lock_graph(self) -> None:
        self.graph_locks += 1

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same in-memory store on every call, like a database."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return factory


class SharedStore:
    """Committed roles plus the lock lock_graph() takes."""

    def __init__(self) -> None:
        self.roles: dict[UUID, Role] = {}
        self.graph_lock = asyncio.Lock()


class SnapshotUnitOfWork(FakeUnitOfWork):
    """Reads a snapshot taken at start; writes become visible on commit.

    Taking the graph lock refreshes the snapshot, as a READ COMMITTED
    statement after an advisory lock would.
    """

    def __init__(self, store: SharedStore) -> None:
        super().__init__()
        self._store = store
        self._holds_lock = False
        self._refresh()

    def _refresh(self) -> None:
        self._base = dict(self._store.roles)
        self.roles._by_id = dict(self._base)

    async def lock_graph(self) -> None:
        await super().lock_graph()
        await self._store.graph_lock.acquire()
        self._holds_lock = True
        self._refresh()

    async def commit(self) -> None:
        await super().commit()
        current = self.roles._by_id
        for role_id, role in current.items():
            if self._base.get(role_id) is not role:
                self._store.roles[role_id] = role
        for role_id in self._base.keys() - current.keys():
            self._store.roles.pop(role_id, None)

    def release(self) -> None:
        if self._holds_lock:
            self._holds_lock = False
            self._store.graph_lock.release()


def make_snapshot_factory(store: SharedStore):
    """Factory opening a fresh snapshot per call, like concurrent transactions."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[SnapshotUnitOfWork]:
        uow = SnapshotUnitOfWork(store)
        # Let every concurrent caller take its snapshot before any proceeds.
        await asyncio.sleep(0)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise
        finally:
            uow.release()

    return factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the shared fake_uow."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def roles(fake_uow: FakeUnitOfWork) -> FakeRoleRepository:
    return fake_uow.roles


@pytest.fixture
def users(fake_uow: FakeUnitOfWork) -> FakeUserRepository:
    return fake_uow.users


@pytest.fixture
def diamond(roles: FakeRoleRepository) -> dict[str, Role]:
    """A inherits [B, C]; B and C both inherit D."""
    d = roles.add_role("D", permissions={"d:read"})
    b = roles.add_role("B", permissions={"b:read"}, inherits=[d.id])
    c = roles.add_role("C", permissions={"c:read"}, inherits=[d.id])
    a = roles.add_role("A", permissions={"a:read"}, inherits=[b.id, c.id])
    return {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def shared_store() -> SharedStore:
    return SharedStore()


@pytest.fixture
def snapshot_uow_factory(shared_store: SharedStore):
    """Factory whose units of work only see each other's committed writes."""
    return make_snapshot_factory(shared_store)
