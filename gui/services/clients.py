"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Optional

from liftlog.config import Settings, get_settings
from liftlog.lift_client import LiftClient


def get_lift_client(settings: Optional[Settings] = None) -> LiftClient:
    """Return a backend client configured from the environment."""

    settings = settings or get_settings()
    return LiftClient(base_url=settings.api_base_url, timeout=settings.request_timeout)
