"""Application wiring: logging and builder construction."""

import logging
import sys

import structlog

from .auth.access import AccessGate
from .auth.session import SessionAccessor
from .config.settings import Settings
from .context.builder import CreatorContextBuilder
from .context.cache import Clock, ProfileContextCache, epoch_millis
from .storage.base import ProfileStore
from .storage.supabase_store import SupabaseProfileStore


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structured logging."""
    log_level = logging.DEBUG if debug else getattr(logging, (level or "INFO").upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stdout,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (structlog.processors.JSONRenderer() if not debug else structlog.dev.ConsoleRenderer()),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


async def create_context_builder(
    settings: Settings,
    session_accessor: SessionAccessor,
    store: ProfileStore | None = None,
    clock: Clock = epoch_millis,
) -> CreatorContextBuilder:
    """Configure logging, then create the store, cache, access gate and builder.

    Without an explicit ``store`` a Supabase store is built from settings,
    raising ``ConfigurationError`` when Supabase is not configured.
    """
    setup_logging(debug=settings.debug, level=settings.log_level)
    logger = structlog.get_logger()

    if store is None:
        store = await SupabaseProfileStore.from_settings(settings)

    cache = ProfileContextCache(ttl_ms=settings.creator_profile_cache_ttl, clock=clock)
    gate = AccessGate(session_accessor, store)

    logger.info(
        "Creator context builder ready",
        store=type(store).__name__,
        cache_ttl_seconds=settings.cache_ttl_seconds,
        production=settings.is_production,
    )
    return CreatorContextBuilder(gate, store, cache)
