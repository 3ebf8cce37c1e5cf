"""Get role use case."""

from uuid import UUID

from rolegraph.application.dto.role_dto import RoleDetails
from rolegraph.application.services import HierarchyAnalyzer, PermissionResolver
from rolegraph.domain.exceptions import NotFound


class GetRoleUseCase:
    """Get a role, optionally with its resolved inheritance."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID, include_inheritance: bool = False) -> RoleDetails:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            parents = await uow.roles.find_by_ids(role.inherits) if role.inherits else []
            details = RoleDetails(role=role, parents=parents)
            if not include_inheritance:
                return details

            inherited = await PermissionResolver(uow.roles).inherited_for(role)
            details.inherited_permissions = inherited
            details.all_permissions = role.permissions | inherited
            details.hierarchy_level = await HierarchyAnalyzer(
                uow.roles
            ).get_role_hierarchy_level(role.id)
            details.total_users = await uow.users.count_assigned(role.id)
            return details
