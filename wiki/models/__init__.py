"""Database models."""
from wiki.models.base import Base, init_db
from wiki.models.site_configuration import SiteConfiguration  # noqa: F401 - for metadata

__all__ = [
    "Base",
    "SiteConfiguration",
    "init_db",
]
