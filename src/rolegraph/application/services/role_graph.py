"""Read view over the role store with pending changes layered on top."""

from collections.abc import Mapping
from uuid import UUID

from rolegraph.application.ports.repositories import RoleRepository
from rolegraph.domain.entities import Role


class StagedRoleGraph:
    """Role lookups where staged roles shadow persisted ones.

    Lets a prospective edge change be validated before anything is written.
    Lookups are memoised for the lifetime of the view only.
    """

    def __init__(
        self, roles: RoleRepository, staged: Mapping[UUID, Role] | None = None
    ) -> None:
        self._roles = roles
        self._staged = dict(staged or {})
        self._loaded: dict[UUID, Role | None] = {}

    async def get(self, role_id: UUID) -> Role | None:
        if role_id in self._staged:
            return self._staged[role_id]
        if role_id not in self._loaded:
            self._loaded[role_id] = await self._roles.get_by_id(role_id)
        return self._loaded[role_id]

    async def name_of(self, role_id: UUID) -> str:
        role = await self.get(role_id)
        return role.name if role else str(role_id)
