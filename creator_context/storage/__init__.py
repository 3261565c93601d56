"""Profile store collaborators."""

from .base import CreatorOwner, ProfileStore
from .memory import InMemoryProfileStore
from .supabase_store import SupabaseProfileStore

__all__ = [
    "CreatorOwner",
    "InMemoryProfileStore",
    "ProfileStore",
    "SupabaseProfileStore",
]
