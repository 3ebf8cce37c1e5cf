"""Permission checker implementation - resolves the user's role graph."""

from collections.abc import Iterable

from rolegraph.application.services import PermissionResolver, UserPermissionAggregator


class RoleGraphPermissionChecker:
    """Checks required permission tokens against a user's effective permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def check(
        self, user_id: str, required: Iterable[str], require_all: bool = True
    ) -> bool:
        """True if the user holds all (or, with require_all=False, any) required tokens."""
        required = set(required)
        if not required:
            return True

        async with self._uow_factory() as uow:
            aggregator = UserPermissionAggregator(uow.users, PermissionResolver(uow.roles))
            held = await aggregator.get_user_permissions(user_id)

        if require_all:
            return required <= held
        return not required.isdisjoint(held)
