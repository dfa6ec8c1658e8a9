"""Runtime-editable site configuration."""
from wiki.configuration.site_settings import (
    DEFAULT_ALLOWED_FILE_TYPES,
    SITE_SETTINGS_ID,
    THEMES_ROOT,
    LoadOutcome,
    LoadResult,
    SiteSettings,
)

__all__ = [
    "DEFAULT_ALLOWED_FILE_TYPES",
    "SITE_SETTINGS_ID",
    "THEMES_ROOT",
    "LoadOutcome",
    "LoadResult",
    "SiteSettings",
]
