"""Union of effective permissions across a user's roles."""

from rolegraph.application.ports.repositories import UserRepository
from rolegraph.application.services.permission_resolver import PermissionResolver
from rolegraph.domain.exceptions import NotFound
from rolegraph.logging import get_logger

logger = get_logger(__name__)


class UserPermissionAggregator:
    """Resolves every role a user holds and unions the results.

    An unknown user and a user without roles both yield an empty set.
    """

    def __init__(self, users: UserRepository, resolver: PermissionResolver) -> None:
        self._users = users
        self._resolver = resolver

    async def get_user_permissions(self, user_id: str) -> frozenset[str]:
        user = await self._users.get_by_id(user_id)
        if user is None or not user.role_ids:
            return frozenset()

        permissions: set[str] = set()
        for role_id in dict.fromkeys(user.role_ids):
            try:
                permissions |= await self._resolver.get_all_permissions(role_id)
            except NotFound:
                logger.warning(
                    "user_role_missing", user_id=user_id, role_id=str(role_id)
                )
        return frozenset(permissions)
