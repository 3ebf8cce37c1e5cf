"""Application entry point and composition root."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from rolegraph import __version__
from rolegraph.application.use_cases.permission.get_role_permissions import (
    GetRolePermissionsUseCase,
)
from rolegraph.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from rolegraph.application.use_cases.role.create_role import CreateRoleUseCase
from rolegraph.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolegraph.application.use_cases.role.get_role import GetRoleUseCase
from rolegraph.application.use_cases.role.list_roles import ListRolesUseCase
from rolegraph.application.use_cases.role.update_role import UpdateRoleUseCase
from rolegraph.config import Settings, get_settings
from rolegraph.infrastructure.permission.permission_checker import (
    RoleGraphPermissionChecker,
)
from rolegraph.infrastructure.persistence.postgres.connection import create_pool
from rolegraph.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from rolegraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class RoleEngine:
    """Operations exposed to the controller layer."""

    create_role: CreateRoleUseCase
    update_role: UpdateRoleUseCase
    delete_role: DeleteRoleUseCase
    get_role: GetRoleUseCase
    list_roles: ListRolesUseCase
    get_role_permissions: GetRolePermissionsUseCase
    get_user_permissions: GetUserPermissionsUseCase
    permission_checker: RoleGraphPermissionChecker


def main() -> None:
    """CLI entry point."""
    print(f"rolegraph v{__version__}")


def build_engine(uow_factory: type) -> RoleEngine:
    """Wire every operation to one unit-of-work factory."""
    return RoleEngine(
        create_role=CreateRoleUseCase(unit_of_work_factory=uow_factory),
        update_role=UpdateRoleUseCase(unit_of_work_factory=uow_factory),
        delete_role=DeleteRoleUseCase(unit_of_work_factory=uow_factory),
        get_role=GetRoleUseCase(unit_of_work_factory=uow_factory),
        list_roles=ListRolesUseCase(unit_of_work_factory=uow_factory),
        get_role_permissions=GetRolePermissionsUseCase(unit_of_work_factory=uow_factory),
        get_user_permissions=GetUserPermissionsUseCase(unit_of_work_factory=uow_factory),
        permission_checker=RoleGraphPermissionChecker(unit_of_work_factory=uow_factory),
    )


@asynccontextmanager
async def open_engine(settings: Settings | None = None) -> AsyncIterator[RoleEngine]:
    """Open a PostgreSQL-backed engine; the pool closes on exit."""
    settings = settings or get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    await pool.open()
    logger.info("pool_opened", min_size=settings.pool_min_size, max_size=settings.pool_max_size)
    try:
        yield build_engine(create_uow_factory(pool))
    finally:
        await pool.close()
        logger.info("pool_closed")
