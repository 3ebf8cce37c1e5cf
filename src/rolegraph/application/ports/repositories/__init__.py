"""Repository ports."""

from rolegraph.application.ports.repositories.role_repository import RoleRepository
from rolegraph.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "RoleRepository",
    "UserRepository",
]
