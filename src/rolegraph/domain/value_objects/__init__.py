"""Domain value objects."""

from rolegraph.domain.value_objects.permission_token import (
    PermissionToken,
    to_permission_set,
)

__all__ = [
    "PermissionToken",
    "to_permission_set",
]
