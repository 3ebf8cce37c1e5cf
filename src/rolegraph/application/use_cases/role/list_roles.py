"""List roles use case."""

from rolegraph.application.dto.role_dto import RoleSummary


class ListRolesUseCase:
    """All roles with the number of users holding each."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[RoleSummary]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
            return [
                RoleSummary(role=role, total_users=await uow.users.count_assigned(role.id))
                for role in roles
            ]
