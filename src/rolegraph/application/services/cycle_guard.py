"""Cycle detection over role inheritance edges."""

from collections.abc import Mapping
from uuid import UUID

from rolegraph.application.ports.repositories import RoleRepository
from rolegraph.application.services.role_graph import StagedRoleGraph
from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import CircularInheritance


class CycleGuard:
    """Rejects inheritance graphs where a role can reach itself.

    Depth-first search following ``inherits`` toward ancestors. Each node is
    unvisited, visiting (on the current path) or visited (proven acyclic).
    Reaching a visiting node means the path from that node onward is a cycle.
    """

    def __init__(self, roles: RoleRepository) -> None:
        self._roles = roles

    async def validate_no_cycle(
        self, role_id: UUID, staged: Mapping[UUID, Role] | None = None
    ) -> None:
        """Raise CircularInheritance if a cycle is reachable from role_id.

        ``staged`` holds prospective role states that take precedence over
        the store, so callers can validate before persisting.
        """
        graph = StagedRoleGraph(self._roles, staged)
        await self._visit(graph, role_id, set(), set(), [])

    async def _visit(
        self,
        graph: StagedRoleGraph,
        role_id: UUID,
        visiting: set[UUID],
        visited: set[UUID],
        path: list[UUID],
    ) -> None:
        if role_id in visiting:
            cycle = [*path[path.index(role_id):], role_id]
            names = [await graph.name_of(i) for i in cycle]
            raise CircularInheritance(cycle, names)
        if role_id in visited:
            return

        visiting.add(role_id)
        path.append(role_id)

        role = await graph.get(role_id)
        if role is not None:
            for parent_id in role.inherits:
                await self._visit(graph, parent_id, visiting, visited, path)

        path.pop()
        visiting.discard(role_id)
        visited.add(role_id)
