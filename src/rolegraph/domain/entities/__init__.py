"""Domain entities."""

from rolegraph.domain.entities.role import Role
from rolegraph.domain.entities.user import UserRoles

__all__ = [
    "Role",
    "UserRoles",
]
