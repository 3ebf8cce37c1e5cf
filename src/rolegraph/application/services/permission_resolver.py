"""Effective permission resolution across inheritance edges."""

from uuid import UUID

from rolegraph.application.ports.repositories import RoleRepository
from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import NotFound


class PermissionResolver:
    """Computes the permissions a role holds directly and through ancestors.

    Every branch of the descent carries its own copy of the visited ids, so
    corrupted (cyclic) data terminates instead of recursing forever. Results
    are sets: diamonds collapse and traversal order is irrelevant.
    """

    def __init__(self, roles: RoleRepository) -> None:
        self._roles = roles

    async def get_inherited_permissions(self, role_id: UUID) -> frozenset[str]:
        """Permissions contributed by every ancestor of role_id. Empty if role is missing."""
        role = await self._roles.get_by_id(role_id)
        if role is None:
            return frozenset()
        return await self.inherited_for(role)

    async def get_all_permissions(self, role_id: UUID) -> frozenset[str]:
        """Own permissions plus inherited ones."""
        role = await self._roles.get_by_id(role_id)
        if role is None:
            raise NotFound("Role", role_id)
        return role.permissions | await self.inherited_for(role)

    async def inherited_for(self, role: Role) -> frozenset[str]:
        """Inherited permissions of an already loaded role."""
        return await self._collect(role, frozenset({role.id}))

    async def _collect(self, role: Role, visited: frozenset[UUID]) -> frozenset[str]:
        if not role.inherits:
            return frozenset()

        collected: set[str] = set()
        for parent in await self._roles.find_by_ids(role.inherits):
            collected |= parent.permissions
            if parent.id in visited:
                continue
            collected |= await self._collect(parent, visited | {parent.id})
        return frozenset(collected)
