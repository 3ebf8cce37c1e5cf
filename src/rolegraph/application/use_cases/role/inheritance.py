"""Inheritance edge checks shared by role mutations."""

from uuid import UUID

from rolegraph.application.ports.repositories import RoleRepository
from rolegraph.application.services import CycleGuard
from rolegraph.domain.entities import Role
from rolegraph.domain.exceptions import CircularInheritance, ValidationError
from rolegraph.logging import get_logger

logger = get_logger(__name__)


async def validate_parents(roles: RoleRepository, parent_ids: list[UUID]) -> list[UUID]:
    """Check every parent id exists and appears once. Returns ids in given order."""
    if not parent_ids:
        return []

    seen: set[UUID] = set()
    for pid in parent_ids:
        if pid in seen:
            raise ValidationError(f"Inherited role listed more than once: {pid}")
        seen.add(pid)

    found = {r.id for r in await roles.find_by_ids(list(parent_ids))}
    missing = [pid for pid in parent_ids if pid not in found]
    if missing:
        raise ValidationError(
            "Inherited roles do not exist: " + ", ".join(str(pid) for pid in missing)
        )
    return list(parent_ids)


async def ensure_acyclic(roles: RoleRepository, prospective: Role) -> None:
    """Run the cycle check against ``prospective`` before it is written."""
    try:
        await CycleGuard(roles).validate_no_cycle(
            prospective.id, staged={prospective.id: prospective}
        )
    except CircularInheritance as exc:
        logger.warning(
            "circular_inheritance_rejected",
            role_id=str(prospective.id),
            cycle=" -> ".join(exc.names),
        )
        raise
