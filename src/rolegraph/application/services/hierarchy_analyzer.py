"""Inheritance depth of roles."""

from uuid import UUID

from rolegraph.application.ports.repositories import RoleRepository


class HierarchyAnalyzer:
    """Longest inheritance chain starting at a role.

    level(R) = 0 when R inherits nothing, else 1 + max(level(parent)).
    A role revisited on the current branch counts as level 0.
    """

    def __init__(self, roles: RoleRepository) -> None:
        self._roles = roles

    async def get_role_hierarchy_level(self, role_id: UUID) -> int:
        return await self._level(role_id, frozenset())

    async def _level(self, role_id: UUID, visited: frozenset[UUID]) -> int:
        if role_id in visited:
            return 0

        role = await self._roles.get_by_id(role_id)
        if role is None or not role.inherits:
            return 0

        visited = visited | {role_id}
        level = 0
        for parent_id in role.inherits:
            level = max(level, await self._level(parent_id, visited) + 1)
        return level
