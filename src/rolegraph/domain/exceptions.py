"""Domain exceptions."""

from collections.abc import Sequence
from uuid import UUID


class RoleGraphError(Exception):
    """Base exception for rolegraph."""

    pass


class NotFound(RoleGraphError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class Conflict(RoleGraphError):
    """Operation conflicts with current state (name taken, role still in use)."""

    def __init__(self, message: str, dependents: Sequence[str] = ()) -> None:
        self.dependents = list(dependents)
        super().__init__(message)


class ValidationError(RoleGraphError):
    """Validation failed for input data."""

    pass


class CircularInheritance(ValidationError):
    """Inheritance edges would form a cycle.

    ``cycle`` holds role ids in traversal order, first and last id equal.
    ``names`` holds the matching role names where they could be resolved.
    """

    def __init__(self, cycle: Sequence[UUID], names: Sequence[str] | None = None) -> None:
        self.cycle = list(cycle)
        self.names = list(names) if names is not None else [str(i) for i in self.cycle]
        super().__init__(f"Circular inheritance detected: {' -> '.join(self.names)}")
