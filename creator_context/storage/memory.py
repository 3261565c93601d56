"""Dict-backed profile store for local development and tests."""

from collections import Counter
from typing import Any

from ..exceptions import StoreReadError
from .base import CreatorOwner


class InMemoryProfileStore:
    """Hold creator and Instagram rows in process memory.

    ``reads`` counts calls per reader method. Setting ``fail_with`` makes every
    reader raise that error instead of answering.
    """

    def __init__(
        self,
        creators: list[dict[str, Any]] | None = None,
        instagram_profiles: list[dict[str, Any]] | None = None,
    ) -> None:
        self.creators: list[dict[str, Any]] = list(creators or [])
        self.instagram_profiles: list[dict[str, Any]] = list(instagram_profiles or [])
        self.reads: Counter[str] = Counter()
        self.fail_with: StoreReadError | None = None

    def add_creator(self, row: dict[str, Any]) -> None:
        self.creators.append(dict(row))

    def add_instagram_profile(self, row: dict[str, Any]) -> None:
        self.instagram_profiles.append(dict(row))

    def _check(self, method: str) -> None:
        self.reads[method] += 1
        if self.fail_with is not None:
            raise self.fail_with

    async def find_creator_by_user_id(self, user_id: str) -> dict[str, Any] | None:
        self._check("find_creator_by_user_id")
        for row in self.creators:
            if row.get("user_id") == user_id:
                return dict(row)
        return None

    async def find_creator_owner_by_id(self, creator_id: str) -> CreatorOwner | None:
        self._check("find_creator_owner_by_id")
        for row in self.creators:
            if str(row.get("id")) == str(creator_id) and row.get("user_id"):
                return CreatorOwner(creator_id=str(row["id"]), owner_user_id=row["user_id"])
        return None

    async def find_instagram_profile(self, user_id: str, username: str | None = None) -> dict[str, Any] | None:
        self._check("find_instagram_profile")
        matches = [
            row
            for row in self.instagram_profiles
            if row.get("user_id") == user_id and (username is None or row.get("username") == username)
        ]
        if not matches:
            return None
        # ISO-8601 timestamps sort lexically; rows without one sort last.
        matches.sort(key=lambda r: r.get("created_at") or "", reverse=True)
        return dict(matches[0])
