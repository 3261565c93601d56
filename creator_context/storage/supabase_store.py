"""Supabase-backed profile store.

Reads go through the async PostgREST client with the service role key, so
row-level security is bypassed and access control is the caller's job
(see ``AccessGate``).
"""

from typing import Any

import structlog
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from ..config.settings import Settings
from ..exceptions import ConfigurationError, StoreReadError
from ..utils.constants import (
    DEFAULT_CREATORS_TABLE,
    DEFAULT_INSTAGRAM_PROFILES_TABLE,
    POSTGREST_NO_ROWS_CODE,
)
from .base import CreatorOwner

logger = structlog.get_logger()


class SupabaseProfileStore:
    """Read creator and Instagram intelligence rows from Supabase."""

    def __init__(
        self,
        client: AsyncClient,
        creators_table: str = DEFAULT_CREATORS_TABLE,
        instagram_profiles_table: str = DEFAULT_INSTAGRAM_PROFILES_TABLE,
    ) -> None:
        self.client = client
        self.creators_table = creators_table
        self.instagram_profiles_table = instagram_profiles_table

    @classmethod
    async def from_settings(cls, settings: Settings) -> "SupabaseProfileStore":
        """Create a client from configured URL and service role key."""
        if not settings.has_supabase:
            raise ConfigurationError("supabase_url and supabase_service_role_key are required")
        client = await acreate_client(settings.supabase_url, settings.supabase_key_str)
        return cls(
            client,
            creators_table=settings.creators_table,
            instagram_profiles_table=settings.instagram_profiles_table,
        )

    # --- Readers ---

    async def find_creator_by_user_id(self, user_id: str) -> dict[str, Any] | None:
        # Fetch two rows so duplicate creator records are detected.
        query = self.client.table(self.creators_table).select("*").eq("user_id", user_id).limit(2)
        return await self._first_row(query, self.creators_table, unique=True)

    async def find_creator_owner_by_id(self, creator_id: str) -> CreatorOwner | None:
        query = self.client.table(self.creators_table).select("id, user_id").eq("id", creator_id).limit(1)
        row = await self._first_row(query, self.creators_table)
        if row is None or not row.get("user_id"):
            return None
        return CreatorOwner(creator_id=str(row.get("id", creator_id)), owner_user_id=str(row["user_id"]))

    async def find_instagram_profile(self, user_id: str, username: str | None = None) -> dict[str, Any] | None:
        query = self.client.table(self.instagram_profiles_table).select("*").eq("user_id", user_id)
        if username:
            query = query.eq("username", username)
        query = query.order("created_at", desc=True).limit(1)
        return await self._first_row(query, self.instagram_profiles_table)

    # --- Private helpers ---

    async def _first_row(self, query: Any, table: str, unique: bool = False) -> dict[str, Any] | None:
        """Execute ``query`` and return its first row, None for no rows.

        With ``unique`` set, more than one row is logged as a warning and the
        first row is used.
        """
        try:
            response = await query.execute()
        except APIError as e:
            if e.code == POSTGREST_NO_ROWS_CODE:
                return None
            logger.error("Supabase query failed", table=table, code=e.code, error=e.message)
            raise StoreReadError(f"Supabase query on {table} failed: {e.message}", table=table, code=e.code) from e
        except Exception as e:
            logger.error("Supabase query failed", table=table, error=str(e))
            raise StoreReadError(f"Supabase query on {table} failed: {e}", table=table) from e

        data = response.data
        if not data:
            return None
        if unique and isinstance(data, list) and len(data) > 1:
            logger.warning("Multiple rows where one was expected", table=table, count=len(data))
        row = data[0] if isinstance(data, list) else data
        if not isinstance(row, dict):
            raise StoreReadError(f"Malformed row from {table}: {type(row).__name__}", table=table)
        return row
