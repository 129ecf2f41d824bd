"""
Backend configuration.

Settings come from environment variables (optionally a local .env file)
with defaults suitable for local play.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings:
    HOST = os.getenv("HANABI_HOST", "127.0.0.1")
    PORT = int(os.getenv("HANABI_PORT", 8000))
    LOG_LEVEL = os.getenv("HANABI_LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = _split(os.getenv("HANABI_CORS_ORIGINS", "*"))


settings = Settings()
