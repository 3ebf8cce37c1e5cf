"""Update role use case."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from rolegraph.application.dto.role_dto import RoleUpdateInput
from rolegraph.application.use_cases.role.inheritance import (
    ensure_acyclic,
    validate_parents,
)
from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import Conflict, NotFound
from rolegraph.domain.value_objects import to_permission_set
from rolegraph.logging import get_logger

logger = get_logger(__name__)


class UpdateRoleUseCase:
    """Patch a role. Changed inheritance edges are checked for cycles first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID, input_data: RoleUpdateInput) -> Role:
        async with self._uow_factory() as uow:
            await uow.lock_graph()
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            updated = replace(role, inherits=list(role.inherits))
            if input_data.name and input_data.name != role.name:
                existing = await uow.roles.get_by_name(input_data.name)
                if existing and existing.id != role.id:
                    raise Conflict(f"Role name already exists: {input_data.name}")
                updated.name = input_data.name
            if input_data.permissions is not None:
                updated.permissions = to_permission_set(input_data.permissions)
            if input_data.description is not None:
                updated.description = input_data.description
            if input_data.inherits is not None:
                updated.inherits = await validate_parents(uow.roles, input_data.inherits)
                await ensure_acyclic(uow.roles, updated)

            updated.updated_at = datetime.now(UTC)
            await uow.roles.update(updated)

        logger.info("role_updated", role_id=str(role_id), name=updated.name)
        return updated
