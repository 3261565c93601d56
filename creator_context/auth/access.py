"""Access gate: resolve which user's profile the caller may read."""

import structlog

from ..exceptions import ForbiddenError, TargetNotFoundError, UnauthenticatedError
from ..storage.base import ProfileStore
from .session import SessionAccessor

logger = structlog.get_logger()


class AccessGate:
    """Resolve the caller's identity and authorize access to a target profile."""

    def __init__(self, session_accessor: SessionAccessor, store: ProfileStore) -> None:
        self.session_accessor = session_accessor
        self.store = store

    async def resolve_and_authorize(self, target_id: str | None = None) -> str:
        """Return the user id whose profile may be read.

        Without ``target_id`` the caller's own id is returned and the store is
        not consulted. With one, the owner record is looked up and must belong
        to the caller.

        Raises:
            UnauthenticatedError: no session or no user id on it.
            TargetNotFoundError: ``target_id`` has no owner record.
            ForbiddenError: ``target_id`` belongs to another user.
            StoreReadError: the owner lookup itself failed.
        """
        session = await self.session_accessor()
        user_id = session.user_id if session else None
        if not user_id:
            raise UnauthenticatedError("User not authenticated")

        if not target_id:
            return user_id

        owner = await self.store.find_creator_owner_by_id(target_id)
        if owner is None:
            raise TargetNotFoundError("Creator not found", target_id=target_id)

        # Only self access for now; delegated roles would be checked here.
        if owner.owner_user_id != user_id:
            logger.warning(
                "Unauthorized access to creator profile",
                user_id=user_id,
                target_id=target_id,
            )
            raise ForbiddenError("Unauthorized access to creator profile", target_id=target_id)

        return owner.owner_user_id
