"""User role-membership repository port."""

from typing import Protocol
from uuid import UUID

from rolegraph.domain.entities import UserRoles


class UserRepository(Protocol):
    """Port for reading which roles users hold."""

    async def get_by_id(self, user_id: str) -> UserRoles | None: ...

    async def count_assigned(self, role_id: UUID) -> int: ...
