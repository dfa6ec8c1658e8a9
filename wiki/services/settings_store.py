"""Load and save the site settings record."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wiki.configuration import SITE_SETTINGS_ID, SiteSettings
from wiki.models import SiteConfiguration

logger = logging.getLogger("wiki.store")


async def get_site_settings(session: AsyncSession) -> SiteSettings:
    """Return the stored settings, or defaults if nothing has been saved yet.

    A corrupted blob also gives defaults (logged by SiteSettings.load_from_json).
    """
    row = await session.get(SiteConfiguration, SITE_SETTINGS_ID)
    if row is None:
        logger.info("No site settings saved yet - using defaults")
        return SiteSettings()
    return SiteSettings.load_from_json(row.content)


async def save_site_settings(session: AsyncSession, settings: SiteSettings) -> None:
    """Insert or overwrite the settings row. Last write wins."""
    content = settings.get_json()
    row = await session.get(SiteConfiguration, SITE_SETTINGS_ID)
    if row:
        row.content = content
    else:
        session.add(SiteConfiguration(id=SITE_SETTINGS_ID, content=content))
    await session.commit()
    logger.debug("Saved site settings (%d bytes)", len(content))
