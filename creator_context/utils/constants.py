"""Application-wide constants."""

from pathlib import Path

APP_HOME: Path = Path.home() / ".creator-context"

# Cache
DEFAULT_CREATOR_PROFILE_CACHE_TTL_MS = 300_000  # 5 minutes

# Tables
DEFAULT_CREATORS_TABLE = "creators"
DEFAULT_INSTAGRAM_PROFILES_TABLE = "instagram_creator_profiles"

# PostgREST "no rows returned" code
POSTGREST_NO_ROWS_CODE = "PGRST116"

# Fallback strings, matched by exact equality downstream
CREATOR_PROFILE_FALLBACK = "Creator profile unavailable."
INSTAGRAM_INTELLIGENCE_FALLBACK = (
    "Instagram Creator Intelligence profile unavailable. Instagram analysis has not been completed yet."
)

INSTAGRAM_CACHE_PREFIX = "instagram"
INSTAGRAM_CURRENT_TOKEN = "current"
