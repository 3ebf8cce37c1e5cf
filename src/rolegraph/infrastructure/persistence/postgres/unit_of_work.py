"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from rolegraph.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from rolegraph.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)

# Advisory lock key shared by every writer of the role graph.
ROLE_GRAPH_LOCK_KEY = 0x526F6C65


class PostgresUnitOfWork:
    """One pooled connection, one transaction.

    Role mutations call lock_graph() first. The advisory lock is held until
    commit or rollback, so the cycle check and the edge write of one mutation
    never interleave with another's. At READ COMMITTED every statement after
    the lock sees the graph as the previous holder committed it.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None
        self.graph_locked = False

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    async def lock_graph(self) -> None:
        if self.graph_locked:
            return
        await self._conn.execute("SELECT pg_advisory_xact_lock(%s)", (ROLE_GRAPH_LOCK_KEY,))
        self.graph_locked = True

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()
        self.graph_locked = False

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()
        self.graph_locked = False


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
