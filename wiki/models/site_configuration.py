"""Stored site settings row (one JSON document keyed by a fixed id)."""
from __future__ import annotations

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wiki.models.base import Base


class SiteConfiguration(Base):
    """Holds SiteSettings.get_json() output. Only the SITE_SETTINGS_ID row is used."""

    __tablename__ = "site_configuration"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
