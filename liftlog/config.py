"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. The GUI entrypoint reads it at startup so
a local .env can point the client at a different backend.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()


@dataclass
class Settings:
    # Backend
    api_base_url: str = os.getenv("LIFTLOG_API_BASE_URL", "http://localhost:5000")
    request_timeout: float = float(os.getenv("LIFTLOG_REQUEST_TIMEOUT", "30"))

    # Window
    window_geometry: str = os.getenv("LIFTLOG_WINDOW_GEOMETRY", "1100x760")

    # Logging
    log_level: str = os.getenv("LIFTLOG_LOG_LEVEL", "INFO")
    verbose: bool = os.getenv("LIFTLOG_VERBOSE", "0") == "1"


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
