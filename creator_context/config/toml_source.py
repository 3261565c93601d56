"""Custom pydantic-settings source for a sectioned TOML configuration file.

The TOML file organises settings into labelled sections (e.g. [cache],
[supabase]) purely for readability. This source flattens all sections into a
single dict keyed by pydantic field name, which is what pydantic-settings
expects from ``__call__()``.

Section → field-name mapping (``SECTION_MAP``) is the single source of truth.
The inverse (``FIELD_TO_SECTION``) is derived at module load time.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from creator_context.utils.constants import APP_HOME

# Default path — can be overridden per-instance or patched in tests.
TOML_PATH: Path = APP_HOME / "config" / "settings.toml"

# ── Section → field-name mapping ─────────────────────────────────────────────

SECTION_MAP: dict[str, list[str]] = {
    "cache": [
        "creator_profile_cache_ttl",
    ],
    "supabase": [
        "supabase_url",
        "supabase_service_role_key",
        "creators_table",
        "instagram_profiles_table",
    ],
    "monitoring": [
        "log_level",
    ],
    "development": [
        "debug",
        "development_mode",
    ],
}

# Inverse lookup: field_name → section_name
FIELD_TO_SECTION: dict[str, str] = {field: section for section, fields in SECTION_MAP.items() for field in fields}


# ── Source class ──────────────────────────────────────────────────────────────


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Flatten a sectioned ``settings.toml`` into a pydantic-settings source.

    Missing file → returns empty dict (graceful no-op).
    Empty-string values for optional fields → omitted (let pydantic default kick in).
    tomlkit wrapper objects → unwrapped to plain Python types before returning.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        toml_path: Path | None = None,
    ) -> None:
        super().__init__(settings_cls)
        # Reference module-level TOML_PATH at call time so tests can monkeypatch it.
        self._toml_path = toml_path if toml_path is not None else TOML_PATH
        self._data: dict[str, Any] = self._load()

    # -- Internal ─────────────────────────────────────────────────────────────

    def _load(self) -> dict[str, Any]:
        if not self._toml_path.exists():
            return {}

        doc = tomlkit.parse(self._toml_path.read_text(encoding="utf-8"))

        flat: dict[str, Any] = {}
        for section, field_names in SECTION_MAP.items():
            table = doc.get(section)
            if table is None:
                continue
            for field_name in field_names:
                if field_name not in table:
                    continue
                raw = _unwrap(table[field_name])
                if raw == "" or raw == []:
                    continue
                flat[field_name] = raw

        return flat

    # -- pydantic-settings interface ──────────────────────────────────────────

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                result[key] = value
        return result


# ── Helpers ───────────────────────────────────────────────────────────────────


def _unwrap(val: Any) -> Any:
    """Convert tomlkit wrapper objects to plain Python types."""
    if hasattr(val, "unwrap"):
        return val.unwrap()
    if isinstance(val, list):
        return [_unwrap(v) for v in val]
    return val
