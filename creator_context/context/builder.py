"""Build cached creator profile context for AI prompts.

Both builders follow the same pipeline: access gate → cache key → cache
lookup → store read → format → cache write. The inner pipeline returns
``Ok`` or ``Err``; the public methods collapse any ``Err`` (and any
unexpected exception) into a fixed fallback string so prompt assembly never
sees an exception.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import structlog

from ..auth.access import AccessGate
from ..exceptions import CreatorContextError, FailureReason, FormattingError
from ..models import CreatorProfileRow, InstagramCreatorProfileRow
from ..storage.base import ProfileStore
from ..utils.constants import (
    CREATOR_PROFILE_FALLBACK,
    INSTAGRAM_CACHE_PREFIX,
    INSTAGRAM_CURRENT_TOKEN,
    INSTAGRAM_INTELLIGENCE_FALLBACK,
)
from .cache import CacheStats, ProfileContextCache
from .formatting import render_creator_profile, render_instagram_intelligence

logger = structlog.get_logger()

PROFILE_FALLBACK_TEMPLATE = (
    "**CREATOR PROFILE FALLBACK (Instagram Intelligence Unavailable):**\n\n"
    "{profile}\n\n"
    "*Note: This is basic creator profile data. For enhanced Instagram-specific insights, "
    "complete your Instagram connection and analysis.*"
)

NO_PERSONALIZATION_FALLBACK = (
    "**CREATOR PROFILE FALLBACK:**\n\n"
    "Creator profile unavailable. Please complete your creator onboarding to get personalized assistance.\n\n"
    "*Note: For enhanced Instagram-specific insights, complete your Instagram connection and analysis.*"
)


def is_fallback(text: str) -> bool:
    """True if ``text`` is one of the fixed fallback strings."""
    return text in (CREATOR_PROFILE_FALLBACK, INSTAGRAM_INTELLIGENCE_FALLBACK)


def instagram_cache_key(user_id: str, username: str | None = None) -> str:
    return f"{INSTAGRAM_CACHE_PREFIX}_{user_id}_{username or INSTAGRAM_CURRENT_TOKEN}"


@dataclass(frozen=True)
class Ok:
    value: str


@dataclass(frozen=True)
class Err:
    reason: FailureReason
    error: BaseException | None = None


Result = Ok | Err

_ERROR_REASONS = (
    FailureReason.STORE_READ_FAILURE,
    FailureReason.FORMATTING_ANOMALY,
    FailureReason.UNEXPECTED,
)


class CreatorContextBuilder:
    """Assemble creator profile and Instagram intelligence context strings."""

    def __init__(self, gate: AccessGate, store: ProfileStore, cache: ProfileContextCache) -> None:
        self.gate = gate
        self.store = store
        self.cache = cache

    # --- Public API ---

    async def build_creator_profile_context(self, target_id: str | None = None) -> str:
        """Formatted creator profile, or ``CREATOR_PROFILE_FALLBACK``."""
        result = await self._guard(self._creator_profile_result(target_id))
        return self._resolve(result, CREATOR_PROFILE_FALLBACK, context="creator_profile", target_id=target_id)

    async def build_instagram_creator_intelligence_context(self, username: str | None = None) -> str:
        """Formatted Instagram intelligence, or ``INSTAGRAM_INTELLIGENCE_FALLBACK``."""
        result = await self._guard(self._instagram_result(username))
        return self._resolve(
            result, INSTAGRAM_INTELLIGENCE_FALLBACK, context="instagram_intelligence", username=username
        )

    async def build_personalization_context(self) -> str:
        """Prefer Instagram intelligence, fall back to the creator profile."""
        creator_profile = await self.build_creator_profile_context()
        intelligence = await self.build_instagram_creator_intelligence_context()

        if not is_fallback(intelligence):
            return intelligence

        logger.info("Instagram intelligence unavailable, using creator profile")
        if not is_fallback(creator_profile):
            return PROFILE_FALLBACK_TEMPLATE.format(profile=creator_profile)
        return NO_PERSONALIZATION_FALLBACK

    def invalidate_creator_profile_cache(self, key: str | None = None) -> None:
        """Drop one cached context (after a profile write), or all of them."""
        self.cache.invalidate(key)

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()

    # --- Pipelines ---

    async def _creator_profile_result(self, target_id: str | None) -> Result:
        try:
            user_id = await self.gate.resolve_and_authorize(target_id)
        except CreatorContextError as e:
            return Err(e.reason, e)

        cache_key = target_id or user_id
        return await self._cached(
            cache_key,
            CREATOR_PROFILE_FALLBACK,
            lambda: self.store.find_creator_by_user_id(user_id),
            lambda row: render_creator_profile(CreatorProfileRow.from_row(row)),
        )

    async def _instagram_result(self, username: str | None) -> Result:
        try:
            user_id = await self.gate.resolve_and_authorize()
        except CreatorContextError as e:
            return Err(e.reason, e)

        return await self._cached(
            instagram_cache_key(user_id, username),
            INSTAGRAM_INTELLIGENCE_FALLBACK,
            lambda: self.store.find_instagram_profile(user_id, username),
            lambda row: render_instagram_intelligence(InstagramCreatorProfileRow.from_row(row)),
        )

    async def _cached(
        self,
        cache_key: str,
        fallback: str,
        read: Callable[[], Awaitable[dict[str, Any] | None]],
        render: Callable[[dict[str, Any]], str],
    ) -> Result:
        """Serve from cache, else read, render and cache.

        Missing rows and store errors cache the fallback so a creator without
        a profile does not hit the store on every call.
        """
        cached = self.cache.get(cache_key)
        if cached is not None:
            return Ok(cached)

        try:
            row = await read()
        except Exception as e:
            self.cache.put(cache_key, fallback)
            return Err(FailureReason.STORE_READ_FAILURE, e)

        if row is None:
            self.cache.put(cache_key, fallback)
            return Err(FailureReason.NO_ROW)

        try:
            formatted = self._render(render, row, cache_key)
        except FormattingError as e:
            return Err(e.reason, e)

        self.cache.put(cache_key, formatted)
        return Ok(formatted)

    @staticmethod
    def _render(render: Callable[[dict[str, Any]], str], row: dict[str, Any], cache_key: str) -> str:
        try:
            return render(row)
        except Exception as e:
            raise FormattingError(f"Failed to render profile context for {cache_key}: {e}") from e

    # --- Error boundary ---

    @staticmethod
    async def _guard(pipeline: Awaitable[Result]) -> Result:
        try:
            return await pipeline
        except Exception as e:
            return Err(FailureReason.UNEXPECTED, e)

    @staticmethod
    def _resolve(result: Result, fallback: str, **context: Any) -> str:
        if isinstance(result, Ok):
            return result.value

        error = str(result.error) if result.error else None
        if result.reason is FailureReason.NO_ROW:
            logger.info("No profile row found", reason=result.reason.value, **context)
        elif result.reason in _ERROR_REASONS:
            logger.error("Error building profile context", reason=result.reason.value, error=error, **context)
        else:
            logger.warning("Profile context access denied", reason=result.reason.value, error=error, **context)
        return fallback
