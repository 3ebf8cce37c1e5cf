"""Role repository port."""

from typing import Protocol
from uuid import UUID

from rolegraph.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence, including inheritance edges."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def find_by_ids(self, role_ids: list[UUID]) -> list[Role]: ...

    async def list_inheriting(self, role_id: UUID) -> list[Role]: ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...
