"""Site settings API: branding, markup, uploads, recaptcha, theme (public read, admin write)."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wiki.configuration import SiteSettings
from wiki.models.base import async_session_factory
from wiki.services.settings_store import get_site_settings, save_site_settings
from web.auth import require_admin

logger = logging.getLogger("wiki.api")

router = APIRouter(prefix="/api/settings", tags=["settings"])


class SettingsResponse(BaseModel):
    """Public view of the settings. The recaptcha private key is never included."""

    model_config = ConfigDict(populate_by_name=True)

    allowed_file_types: str = Field(alias="AllowedFileTypes")
    allowed_file_types_list: list[str] = Field(alias="AllowedFileTypesList")
    allow_user_signup: bool = Field(alias="AllowUserSignup")
    is_recaptcha_enabled: bool = Field(alias="IsRecaptchaEnabled")
    markup_type: str = Field(alias="MarkupType")
    recaptcha_public_key: str = Field(alias="RecaptchaPublicKey")
    site_url: str = Field(alias="SiteUrl")
    site_name: str = Field(alias="SiteName")
    theme: str = Field(alias="Theme")
    theme_path: str = Field(alias="ThemePath")

    @classmethod
    def from_settings(cls, settings: SiteSettings) -> SettingsResponse:
        return cls(
            allowed_file_types=settings.allowed_file_types,
            allowed_file_types_list=settings.allowed_file_types_list,
            allow_user_signup=settings.allow_user_signup,
            is_recaptcha_enabled=settings.is_recaptcha_enabled,
            markup_type=settings.markup_type,
            recaptcha_public_key=settings.recaptcha_public_key,
            site_url=settings.site_url,
            site_name=settings.site_name,
            theme=settings.theme,
            theme_path=settings.theme_path,
        )


class SettingsUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    allowed_file_types: Optional[str] = Field(None, alias="AllowedFileTypes")
    allow_user_signup: Optional[bool] = Field(None, alias="AllowUserSignup")
    is_recaptcha_enabled: Optional[bool] = Field(None, alias="IsRecaptchaEnabled")
    markup_type: Optional[str] = Field(None, alias="MarkupType")
    recaptcha_private_key: Optional[str] = Field(None, alias="RecaptchaPrivateKey")
    recaptcha_public_key: Optional[str] = Field(None, alias="RecaptchaPublicKey")
    site_url: Optional[str] = Field(None, alias="SiteUrl")
    site_name: Optional[str] = Field(None, alias="SiteName")
    theme: Optional[str] = Field(None, alias="Theme")


@router.get("", response_model=SettingsResponse)
async def get_settings():
    """Get site settings (public, for theming and the upload form)."""
    async with async_session_factory() as session:
        settings = await get_site_settings(session)
    return SettingsResponse.from_settings(settings)


@router.patch("", response_model=SettingsResponse)
async def update_settings(body: SettingsUpdate, admin=Depends(require_admin)):
    """Update site settings (admin only). Fields left out are unchanged.

    A field sent as null is also left unchanged; send "" to clear a text field
    (an empty AllowedFileTypes reverts to the default list on the next read).
    """
    updates = body.model_dump(exclude_unset=True)
    async with async_session_factory() as session:
        settings = await get_site_settings(session)
        for key, value in updates.items():
            if value is not None:
                setattr(settings, key, value)
        await save_site_settings(session, settings)
    logger.info("Site settings updated: %s", ", ".join(sorted(updates)) or "nothing")
    return SettingsResponse.from_settings(settings)


@router.get("/export")
async def export_settings(admin=Depends(require_admin)):
    """Export the stored settings document as JSON backup (admin only). Includes secrets."""
    async with async_session_factory() as session:
        settings = await get_site_settings(session)
    return Response(content=settings.get_json(), media_type="application/json")


@router.post("/import", response_model=SettingsResponse)
async def import_settings(request: Request, admin=Depends(require_admin)):
    """Restore settings from a JSON backup (admin only). Replaces the whole record.

    Malformed JSON restores defaults; wrongly typed values are rejected with 422.
    """
    raw = (await request.body()).decode("utf-8", errors="replace")
    try:
        settings = SiteSettings.load_from_json(raw)
    except ValidationError as e:
        raise HTTPException(422, [err["msg"] for err in e.errors()]) from e
    async with async_session_factory() as session:
        await save_site_settings(session, settings)
    logger.info("Site settings imported")
    return SettingsResponse.from_settings(settings)
