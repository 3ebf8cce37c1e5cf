"""Role DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from rolegraph.domain.entities import Role


@dataclass
class RoleCreateInput:
    """Input for creating a role."""

    name: str
    permissions: list[str] = field(default_factory=list)
    description: str | None = None
    inherits: list[UUID] = field(default_factory=list)


@dataclass
class RoleUpdateInput:
    """Partial role update. ``None`` leaves a field unchanged; ``inherits=[]`` clears edges."""

    name: str | None = None
    permissions: list[str] | None = None
    description: str | None = None
    inherits: list[UUID] | None = None


@dataclass
class RoleSummary:
    """Role with the number of users currently holding it."""

    role: Role
    total_users: int


@dataclass
class RoleDetails:
    """Role with resolved parents and, on request, its effective permissions."""

    role: Role
    parents: list[Role]
    inherited_permissions: frozenset[str] | None = None
    all_permissions: frozenset[str] | None = None
    hierarchy_level: int | None = None
    total_users: int | None = None
