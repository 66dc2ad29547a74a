"""
Lift API Client - Talk to the LiftLog backend.

Wraps the three endpoints the desktop client needs:
- GET  /lifts         full lift history
- POST /log_lift      record one lift
- POST /upload_video  multipart video upload with an AI-analysis flag
"""
from typing import Any, List, Optional

import requests

from .config import get_settings
from .models.schemas import LiftEntry, LiftRecord, UploadSelection
from .utils.logger import get_logger

logger = get_logger(__name__)


class LiftApiError(Exception):
    """Base error for any failed backend call."""


class LiftConnectionError(LiftApiError):
    """The request never produced a response (network error, timeout)."""


class LiftResponseError(LiftApiError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int, endpoint: str):
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(f"{endpoint} returned HTTP {status_code}")


class LiftPayloadError(LiftApiError):
    """The backend answered 2xx but the body was not a JSON array."""


class LiftClient:
    """
    Client for the LiftLog backend.

    Every request carries the configured timeout. Transport failures are
    raised as LiftConnectionError, non-2xx answers as LiftResponseError.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            base_url: Backend root URL (defaults to LIFTLOG_API_BASE_URL)
            timeout: Per-request timeout in seconds (defaults to LIFTLOG_REQUEST_TIMEOUT)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = requests.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, endpoint, exc)
            raise LiftConnectionError(str(exc)) from exc

        if not response.ok:
            logger.warning("%s %s -> HTTP %s", method, endpoint, response.status_code)
            raise LiftResponseError(response.status_code, endpoint)

        logger.debug("%s %s -> HTTP %s", method, endpoint, response.status_code)
        return response

    @staticmethod
    def _json_or_none(response: requests.Response) -> Optional[Any]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def list_lifts(self) -> List[LiftRecord]:
        """
        Fetch the full lift history.

        Rows with unreadable fields are kept as records with those fields
        set to None; only a body that is not a JSON array is rejected.

        Returns:
            One record per array element, in the order the backend sent them
        """
        response = self._request("GET", "/lifts")
        try:
            data = response.json()
        except ValueError as exc:
            raise LiftPayloadError("GET /lifts did not return JSON") from exc

        if not isinstance(data, list):
            raise LiftPayloadError("GET /lifts did not return a JSON array")

        return [LiftRecord.from_raw(item) for item in data]

    def log_lift(self, entry: LiftEntry) -> Optional[Any]:
        """Record one lift. Returns the decoded response body, if any."""
        response = self._request("POST", "/log_lift", json=entry.to_payload())
        return self._json_or_none(response)

    def upload_video(self, selection: UploadSelection, enable_ai: bool) -> Optional[Any]:
        """
        Upload a training video as multipart form data.

        Args:
            selection: Accepted video file
            enable_ai: Ask the backend to run AI analysis on the video
        """
        data = {"enableAI": "true" if enable_ai else "false"}
        try:
            handle = selection.path.open("rb")
        except OSError as exc:
            raise LiftApiError(f"Could not read {selection.filename}: {exc}") from exc

        with handle:
            files = {"video": (selection.filename, handle, selection.mime_type)}
            response = self._request("POST", "/upload_video", data=data, files=files)
        return self._json_or_none(response)
