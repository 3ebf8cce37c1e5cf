"""Create role use case."""

from datetime import UTC, datetime
from uuid import uuid4

from rolegraph.application.dto.role_dto import RoleCreateInput
from rolegraph.application.use_cases.role.inheritance import (
    ensure_acyclic,
    validate_parents,
)
from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import Conflict
from rolegraph.domain.value_objects import to_permission_set
from rolegraph.logging import get_logger

logger = get_logger(__name__)


class CreateRoleUseCase:
    """Create a role, validating its inheritance edges before writing."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, input_data: RoleCreateInput) -> Role:
        """Create role. Raises Conflict on duplicate name, ValidationError on bad parents."""
        async with self._uow_factory() as uow:
            await uow.lock_graph()
            if await uow.roles.get_by_name(input_data.name):
                raise Conflict(f"Role name already exists: {input_data.name}")

            inherits = await validate_parents(uow.roles, input_data.inherits)
            now = datetime.now(UTC)
            role = Role(
                id=uuid4(),
                name=input_data.name,
                description=input_data.description,
                permissions=to_permission_set(input_data.permissions),
                inherits=inherits,
                created_at=now,
                updated_at=now,
            )
            if role.inherits:
                await ensure_acyclic(uow.roles, role)

            await uow.roles.create(role)

        logger.info(
            "role_created",
            role_id=str(role.id),
            name=role.name,
            parents=len(role.inherits),
        )
        return role
