"""PostgreSQL role repository implementation."""

from collections import defaultdict
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import Conflict

_ROLE_COLUMNS = "r.id, r.name, r.description, r.created_at, r.updated_at"


class PostgresRoleRepository:
    """Role repository. Permissions and inheritance edges live in side tables."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        roles = await self._select(f"SELECT {_ROLE_COLUMNS} FROM role r WHERE r.id = %s", (role_id,))
        return roles[0] if roles else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        roles = await self._select(f"SELECT {_ROLE_COLUMNS} FROM role r WHERE r.name = %s", (name,))
        return roles[0] if roles else None

    async def find_by_ids(self, role_ids: list[UUID]) -> list[Role]:
        """Get existing roles among role_ids, in the order given."""
        if not role_ids:
            return []
        roles = await self._select(
            f"SELECT {_ROLE_COLUMNS} FROM role r WHERE r.id = ANY(%s)", (list(role_ids),)
        )
        by_id = {r.id: r for r in roles}
        return [by_id[i] for i in dict.fromkeys(role_ids) if i in by_id]

    async def list_inheriting(self, role_id: UUID) -> list[Role]:
        """List roles that inherit directly from role_id."""
        return await self._select(
            f"SELECT {_ROLE_COLUMNS} FROM role r "
            "JOIN role_inheritance ri ON ri.role_id = r.id "
            "WHERE ri.parent_id = %s ORDER BY r.name",
            (role_id,),
        )

    async def list_all(self) -> list[Role]:
        """List all roles."""
        return await self._select(f"SELECT {_ROLE_COLUMNS} FROM role r ORDER BY r.name")

    async def create(self, role: Role) -> Role:
        """Create role with its permissions and edges. Raises Conflict on a taken name."""
        try:
            await self._conn.execute(
                "INSERT INTO role (id, name, description, created_at, updated_at) "
                "VALUES (%s, %s, %s, %s, %s)",
                (role.id, role.name, role.description, role.created_at, role.updated_at),
            )
        except UniqueViolation as exc:
            raise Conflict(f"Role name already exists: {role.name}") from exc
        await self._write_links(role)
        return role

    async def update(self, role: Role) -> None:
        """Update role fields and replace its permissions and edges."""
        try:
            await self._conn.execute(
                "UPDATE role SET name=%s, description=%s, updated_at=%s WHERE id=%s",
                (role.name, role.description, role.updated_at, role.id),
            )
        except UniqueViolation as exc:
            raise Conflict(f"Role name already exists: {role.name}") from exc
        await self._conn.execute("DELETE FROM role_permission WHERE role_id = %s", (role.id,))
        await self._conn.execute("DELETE FROM role_inheritance WHERE role_id = %s", (role.id,))
        await self._write_links(role)

    async def delete(self, role_id: UUID) -> None:
        """Delete role. Its own edges go first so a self-edge cannot block it."""
        await self._conn.execute("DELETE FROM role_inheritance WHERE role_id = %s", (role_id,))
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def _write_links(self, role: Role) -> None:
        async with self._conn.cursor() as cur:
            if role.permissions:
                await cur.executemany(
                    "INSERT INTO role_permission (role_id, permission) VALUES (%s, %s)",
                    [(role.id, p) for p in sorted(role.permissions)],
                )
            if role.inherits:
                await cur.executemany(
                    "INSERT INTO role_inheritance (role_id, parent_id, position) "
                    "VALUES (%s, %s, %s)",
                    [(role.id, parent_id, pos) for pos, parent_id in enumerate(role.inherits)],
                )

    async def _select(self, query: str, params: tuple = ()) -> list[Role]:
        cur = await self._conn.execute(query, params)
        rows = await cur.fetchall()
        if not rows:
            return []

        ids = [r[0] for r in rows]
        permissions: dict[UUID, set[str]] = defaultdict(set)
        cur = await self._conn.execute(
            "SELECT role_id, permission FROM role_permission WHERE role_id = ANY(%s)",
            (ids,),
        )
        for role_id, permission in await cur.fetchall():
            permissions[role_id].add(permission)

        inherits: dict[UUID, list[UUID]] = defaultdict(list)
        cur = await self._conn.execute(
            "SELECT role_id, parent_id FROM role_inheritance "
            "WHERE role_id = ANY(%s) ORDER BY role_id, position",
            (ids,),
        )
        for role_id, parent_id in await cur.fetchall():
            inherits[role_id].append(parent_id)

        return [
            Role(
                id=r[0],
                name=r[1],
                description=r[2],
                permissions=frozenset(permissions[r[0]]),
                inherits=inherits[r[0]],
                created_at=r[3],
                updated_at=r[4],
            )
            for r in rows
        ]
