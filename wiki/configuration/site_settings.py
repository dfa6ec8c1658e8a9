"""Site settings stored in the database: branding, markup, uploads, recaptcha, theme.

These are the settings that can change without restarting the application.
The whole record is persisted as a single JSON blob (see get_json/load_from_json).
"""
from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_serializer,
)

logger = logging.getLogger("wiki.settings")

# Well-known id of the one settings row
SITE_SETTINGS_ID = uuid.UUID("b960e8e5-529f-4f7c-aee4-28eb23e13dbd")

DEFAULT_ALLOWED_FILE_TYPES = "jpg, png, gif"
THEMES_ROOT = "~/Themes"


class LoadOutcome(enum.Enum):
    """Which path load_from_json took."""

    PARSED = "parsed"
    DEFAULTED_EMPTY = "defaulted_empty"
    DEFAULTED_INVALID = "defaulted_invalid"


@dataclass(frozen=True)
class LoadResult:
    settings: SiteSettings
    outcome: LoadOutcome


class SiteSettings(BaseModel):
    """Settings that do not require an application restart when changed.

    Attribute names are snake_case; the JSON keys (aliases) are the names the
    front-end and the stored blob use, e.g. ``SiteName``.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Backing value for allowed_file_types. Read through the property, which heals empty values.
    raw_allowed_file_types: Optional[str] = Field(
        DEFAULT_ALLOWED_FILE_TYPES,
        validation_alias=AliasChoices("AllowedFileTypes", "allowed_file_types", "raw_allowed_file_types"),
        serialization_alias="AllowedFileTypes",
    )
    # Ignored by the web layer when external (windows) authentication is active
    allow_user_signup: bool = Field(False, alias="AllowUserSignup")
    is_recaptcha_enabled: bool = Field(False, alias="IsRecaptchaEnabled")
    # Creole, Markdown, MediaWiki... kept as text so it passes straight through to the editor script
    markup_type: str = Field("Creole", alias="MarkupType")
    recaptcha_private_key: str = Field("", alias="RecaptchaPrivateKey")
    recaptcha_public_key: str = Field("", alias="RecaptchaPublicKey")
    site_url: str = Field("", alias="SiteUrl")
    site_name: str = Field("Your site", alias="SiteName")
    # Older docs say "Blackbar"; Mediawiki is what a fresh install gets
    theme: str = Field("Mediawiki", alias="Theme")

    _logger: logging.Logger = PrivateAttr(default_factory=lambda: logger)

    def __eq__(self, other: object) -> bool:
        # The attached logger is not part of the value
        if not isinstance(other, SiteSettings):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def with_logger(self, log: logging.Logger) -> SiteSettings:
        """Send this instance's warnings to ``log`` instead of the module logger."""
        self._logger = log
        return self

    @property
    def allowed_file_types(self) -> str:
        """The file types allowed for uploading, e.g. ``"jpg, png, gif"``.

        An empty value is replaced (and stored) with the default list on read.
        """
        if not self.raw_allowed_file_types:
            self._logger.warning(
                "The allowed file types setting is empty - populating with default types jpg, png, gif."
            )
            self.raw_allowed_file_types = DEFAULT_ALLOWED_FILE_TYPES
        return self.raw_allowed_file_types

    @allowed_file_types.setter
    def allowed_file_types(self, value: Optional[str]) -> None:
        self.raw_allowed_file_types = value

    @property
    def allowed_file_types_list(self) -> list[str]:
        """File extensions permitted for upload, in the order configured. Empty tokens are kept."""
        return self.allowed_file_types.replace(" ", "").split(",")

    @property
    def theme_path(self) -> str:
        """Relative path to the current theme directory, e.g. ``~/Themes/Mediawiki`` (no trailing slash)."""
        return f"{THEMES_ROOT}/{self.theme}"

    @field_serializer("raw_allowed_file_types")
    def _serialize_allowed_file_types(self, value: Optional[str]) -> str:
        return self.allowed_file_types

    def get_json(self) -> str:
        """Serialize the stored fields to indented JSON. Derived properties are not included."""
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def load_from_json_result(cls, json_text: Optional[str], log: Optional[logging.Logger] = None) -> LoadResult:
        """Parse ``json_text`` and report whether defaults had to be used.

        Empty input and JSON syntax errors give a default instance. Any other
        validation failure (wrong value types, not an object) is raised.
        """
        log = log or logger
        if not json_text:
            log.warning(
                "SiteSettings.load_from_json - json string was empty (returning a default SiteSettings object)"
            )
            return LoadResult(cls().with_logger(log), LoadOutcome.DEFAULTED_EMPTY)

        try:
            settings = cls.model_validate_json(json_text)
        except ValidationError as e:
            if not any(err["type"] == "json_invalid" for err in e.errors()):
                raise
            log.error("SiteSettings.load_from_json - an exception occurred deserializing the JSON - %s", e)
            return LoadResult(cls().with_logger(log), LoadOutcome.DEFAULTED_INVALID)

        return LoadResult(settings.with_logger(log), LoadOutcome.PARSED)

    @classmethod
    def load_from_json(cls, json_text: Optional[str], log: Optional[logging.Logger] = None) -> SiteSettings:
        """Parse settings from JSON, falling back to defaults for empty or malformed input."""
        return cls.load_from_json_result(json_text, log).settings
