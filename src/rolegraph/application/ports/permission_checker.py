"""Permission checker port - RBAC authorization."""

from collections.abc import Iterable
from typing import Protocol


class PermissionChecker(Protocol):
    """Port for checking whether a user holds permission tokens."""

    async def check(
        self, user_id: str, required: Iterable[str], require_all: bool = True
    ) -> bool: ...
