"""Get effective permissions of a user."""

from rolegraph.application.services import PermissionResolver, UserPermissionAggregator


class GetUserPermissionsUseCase:
    """Union of effective permissions over every role the user holds."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> frozenset[str]:
        async with self._uow_factory() as uow:
            aggregator = UserPermissionAggregator(uow.users, PermissionResolver(uow.roles))
            return await aggregator.get_user_permissions(user_id)
