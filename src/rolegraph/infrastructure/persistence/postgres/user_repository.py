"""PostgreSQL user role-membership repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegraph.domain.entities import UserRoles


class PostgresUserRepository:
    """Reads the user_role membership table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> UserRoles | None:
        """Get roles held by user. None when the user holds no role rows."""
        cur = await self._conn.execute(
            "SELECT role_id FROM user_role WHERE user_id = %s ORDER BY position",
            (user_id,),
        )
        rows = await cur.fetchall()
        if not rows:
            return None
        return UserRoles(user_id=user_id, role_ids=[r[0] for r in rows])

    async def count_assigned(self, role_id: UUID) -> int:
        """Count users whose role list contains role_id."""
        cur = await self._conn.execute(
            "SELECT count(DISTINCT user_id) FROM user_role WHERE role_id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else 0
