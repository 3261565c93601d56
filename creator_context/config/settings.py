"""Configuration management using Pydantic Settings.

Features:
- Environment variable loading
- Sectioned settings.toml source
- Type validation
- Computed properties
"""

from typing import Any

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from creator_context.utils.constants import (
    APP_HOME,
    DEFAULT_CREATOR_PROFILE_CACHE_TTL_MS,
    DEFAULT_CREATORS_TABLE,
    DEFAULT_INSTAGRAM_PROFILES_TABLE,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Cache
    creator_profile_cache_ttl: int = Field(
        DEFAULT_CREATOR_PROFILE_CACHE_TTL_MS,
        description="Creator profile context cache TTL in milliseconds",
        ge=0,
    )

    # Supabase
    supabase_url: str | None = Field(
        None,
        description="Supabase project URL",
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
    )
    supabase_service_role_key: SecretStr | None = Field(
        None,
        description="Supabase service role key (server side only)",
        validation_alias=AliasChoices("supabase_service_role_key", "supabase_key"),
    )
    creators_table: str = Field(DEFAULT_CREATORS_TABLE, description="Creator profile table")
    instagram_profiles_table: str = Field(
        DEFAULT_INSTAGRAM_PROFILES_TABLE, description="Instagram creator intelligence table"
    )

    # Monitoring
    log_level: str = Field("INFO", description="Logging level")

    # Development
    debug: bool = Field(False, description="Enable debug mode")
    development_mode: bool = Field(False, description="Enable development features")

    model_config = SettingsConfigDict(
        env_file=[
            str(APP_HOME / "config" / ".env"),
            ".env",
        ],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("creator_profile_cache_ttl", mode="before")
    @classmethod
    def parse_cache_ttl(cls, v: Any) -> Any:
        """Accept TTL strings such as '300000' or ' 60000 '."""
        if isinstance(v, str):
            value = v.strip()
            if not value:
                return DEFAULT_CREATOR_PROFILE_CACHE_TTL_MS
            return int(value)
        return v

    @field_validator("supabase_url", mode="before")
    @classmethod
    def validate_supabase_url(cls, v: Any) -> str | None:
        """Treat blank URLs as unset and strip trailing slashes."""
        if v is None:
            return None
        value = str(v).strip()
        if not value:
            return None
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init kwargs > env vars > settings.toml > .env."""
        from .toml_source import TomlSettingsSource

        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls),
            dotenv_settings,
        )

    @property
    def cache_ttl_seconds(self) -> float:
        """Cache TTL expressed in seconds."""
        return self.creator_profile_cache_ttl / 1000

    @property
    def has_supabase(self) -> bool:
        """Both the URL and the service role key are configured."""
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def supabase_key_str(self) -> str | None:
        """Get the Supabase service role key as string."""
        if self.supabase_service_role_key:
            return self.supabase_service_role_key.get_secret_value()
        return None

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not (self.debug or self.development_mode)
