"""Profile store interface.

Readers return ``None`` when no row matches and raise ``StoreReadError`` on
any other failure, so callers can tell the two apart.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class CreatorOwner:
    creator_id: str
    owner_user_id: str


class ProfileStore(Protocol):
    async def find_creator_by_user_id(self, user_id: str) -> dict[str, Any] | None: ...

    async def find_creator_owner_by_id(self, creator_id: str) -> CreatorOwner | None: ...

    async def find_instagram_profile(self, user_id: str, username: str | None = None) -> dict[str, Any] | None:
        """Row for ``username``, or the most recently created one when omitted."""
        ...
