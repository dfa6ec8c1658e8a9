"""Configuration for the wiki settings service."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Database
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(__file__).parent / 'wiki.db'}",
)

# Shared secret for settings writes (PATCH / export / import). Empty disables them.
ADMIN_API_SECRET = os.getenv("ADMIN_API_SECRET", "")

# HTTP server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
