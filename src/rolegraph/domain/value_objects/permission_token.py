"""Permission tokens - opaque strings compared by value."""

import sys
from collections.abc import Iterable
from typing import NewType

PermissionToken = NewType("PermissionToken", str)


def to_permission_set(tokens: Iterable[str] | None) -> frozenset[PermissionToken]:
    """Intern tokens and collapse duplicates."""
    if not tokens:
        return frozenset()
    return frozenset(PermissionToken(sys.intern(str(t))) for t in tokens)
