"""Get effective permissions of a role."""

from uuid import UUID

from rolegraph.application.services import PermissionResolver


class GetRolePermissionsUseCase:
    """Own plus inherited permissions of a role. Raises NotFound for unknown roles."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> frozenset[str]:
        async with self._uow_factory() as uow:
            return await PermissionResolver(uow.roles).get_all_permissions(role_id)
