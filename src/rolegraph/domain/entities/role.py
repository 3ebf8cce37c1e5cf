"""Role entity - node of the inheritance graph."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Role:
    """Role with directly-assigned permissions and ordered parent role ids."""

    id: UUID
    name: str
    description: str | None = None
    permissions: frozenset[str] = frozenset()
    inherits: list[UUID] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
