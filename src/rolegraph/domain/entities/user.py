"""User role membership - the user itself lives outside this engine."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class UserRoles:
    """Roles held by a user. No precedence between them."""

    user_id: str
    role_ids: list[UUID] = field(default_factory=list)
