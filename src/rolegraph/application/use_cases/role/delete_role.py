"""Delete role use case."""

from uuid import UUID

from rolegraph.domain.exceptions import Conflict, NotFound
from rolegraph.logging import get_logger

logger = get_logger(__name__)


class DeleteRoleUseCase:
    """Delete a role nobody inherits from and nobody holds."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> None:
        async with self._uow_factory() as uow:
            await uow.lock_graph()
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            dependents = [
                r.name for r in await uow.roles.list_inheriting(role.id) if r.id != role.id
            ]
            if dependents:
                raise Conflict(
                    f"Cannot delete role {role.name}. It is inherited by: "
                    + ", ".join(dependents),
                    dependents=dependents,
                )

            assigned = await uow.users.count_assigned(role.id)
            if assigned:
                raise Conflict(
                    f"Cannot delete role {role.name}. It is assigned to {assigned} user(s)"
                )

            await uow.roles.delete(role.id)

        logger.info("role_deleted", role_id=str(role_id), name=role.name)
