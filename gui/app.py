"""Main GUI application object.

``LiftLogApp`` is the view/state controller. It owns the ``AppState``, runs
the three request flows (history, log lift, upload video) through a runner,
and notifies subscribed views after every change. It has no Tk dependency,
so the whole flow logic runs headless under the inline runner.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from datetime import date
from typing import Any, Callable, List, Optional, Union

from gui.services.clients import get_lift_client
from gui.services.stats_service import DashboardStats, compute_stats
from gui.state import AppState, Flow, LiftForm, MessageKind, Tab
from gui.utils.async_tasks import run_async
from gui.utils.logging import log
from liftlog.lift_client import LiftApiError, LiftConnectionError
from liftlog.models.schemas import LiftEntry, LiftRecord
from liftlog.validation import LiftValidationError, check_video, validate_lift_form

LOG_SUCCESS = "Lift logged successfully!"
LOG_FAILURE = "Failed to log lift. Please try again."
CONNECTION_ERROR = "Could not reach the server. Check your connection and try again."
UPLOAD_PROMPT = "Please select a video file first."
UPLOAD_REJECTED = "Please select a valid video file (MP4, AVI, MOV, WMV or WebM)."
UPLOAD_SUCCESS = "Video uploaded successfully!"
UPLOAD_FAILURE = "Failed to upload video. Please try again."

_FORM_FIELDS = {f.name for f in fields(LiftForm)}


class LiftLogApp:
    """Controller shared by every view."""

    def __init__(
        self,
        client=None,
        runner: Callable = run_async,
        state: Optional[AppState] = None,
        today: Callable[[], date] = date.today,
        verbose: bool = False,
    ):
        self.client = client if client is not None else get_lift_client()
        self.runner = runner
        self.state = state or AppState()
        self.today = today
        self.verbose = verbose
        self._listeners: List[Callable[[AppState], None]] = []
        self._history_requested = False

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def subscribe(self, listener: Callable[[AppState], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    def _trace(self, event: str, **details: Any) -> None:
        if self.verbose:
            log(f"TRACE:{event} {details or ''}".rstrip(), logging.DEBUG)

    def mount(self) -> None:
        """Initial load once the window exists."""
        self.load_history()

    # ------------------------------------------------------------------
    # Navigation and form input
    # ------------------------------------------------------------------
    def switch_view(self, view_name: Union[Tab, str]) -> None:
        """Switch the active view."""

        self.state.current_view = Tab(view_name)
        self._trace("switch_view", view=self.state.current_view.value)
        self._notify()

    def update_form(self, **values: str) -> None:
        """Mirror widget edits into the form state.

        Views call this on every keystroke, so it does not notify.
        """
        unknown = set(values) - _FORM_FIELDS
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(sorted(unknown))}")
        for name, value in values.items():
            setattr(self.state.form, name, value)

    def set_enable_ai(self, enabled: bool) -> None:
        self.state.upload.enable_ai = bool(enabled)

    def dashboard_stats(self) -> DashboardStats:
        return compute_stats(self.state.lifts, self.today())

    # ------------------------------------------------------------------
    # History flow
    # ------------------------------------------------------------------
    def load_history(self) -> bool:
        """Fetch the full lift list. Returns False if the request was deferred."""
        flow = self.state.flow(Flow.HISTORY)
        if flow.loading:
            self._history_requested = True
            self._trace("load_history.deferred")
            return False

        flow.start()
        self._notify()
        self.runner(self.client.list_lifts, self._on_history_loaded)
        return True

    def _on_history_loaded(self, lifts: Optional[List[LiftRecord]], error: Optional[BaseException]) -> None:
        self.state.flow(Flow.HISTORY).settle()
        try:
            if error is None:
                self.state.lifts = list(lifts or [])
                log(f"Loaded {len(self.state.lifts)} lifts")
            elif isinstance(error, LiftApiError):
                log(f"Could not load lift history: {error}", logging.WARNING)
            else:
                raise error
        finally:
            # A fetch queued while this one was in flight still runs.
            if self._history_requested:
                self._history_requested = False
                self.load_history()
            else:
                self._notify()

    # ------------------------------------------------------------------
    # Log lift flow
    # ------------------------------------------------------------------
    def submit_lift(self) -> bool:
        """Validate the form and post it. Returns True if a request was sent."""
        flow = self.state.flow(Flow.LOG_LIFT)
        if flow.loading:
            self._trace("submit_lift.ignored", reason="in flight")
            return False

        form = self.state.form
        try:
            entry = validate_lift_form(form.lift_type, form.weight, form.reps, form.date)
        except LiftValidationError as exc:
            self._trace("submit_lift.rejected", field=exc.field, reason=exc.reason.value)
            flow.settle(exc.message, MessageKind.ERROR)
            self._notify()
            return False

        flow.start()
        self._notify()
        self.runner(
            lambda: self.client.log_lift(entry),
            lambda _result, error: self._on_lift_logged(entry, error),
        )
        return True

    def _on_lift_logged(self, entry: LiftEntry, error: Optional[BaseException]) -> None:
        flow = self.state.flow(Flow.LOG_LIFT)
        if error is None:
            log(f"Logged {entry.lift_type.value} {entry.weight}kg x {entry.reps} on {entry.date}")
            flow.settle(LOG_SUCCESS, MessageKind.SUCCESS)
            form = self.state.form
            form.weight = ""
            form.reps = ""
            form.date = self.today().isoformat()
            self._notify()
            self.load_history()
            return

        if isinstance(error, LiftConnectionError):
            flow.settle(CONNECTION_ERROR, MessageKind.ERROR)
        elif isinstance(error, LiftApiError):
            flow.settle(LOG_FAILURE, MessageKind.ERROR)
        else:
            flow.settle()
            self._notify()
            raise error
        log(f"Lift submission failed: {error}", logging.WARNING)
        self._notify()

    # ------------------------------------------------------------------
    # Upload flow
    # ------------------------------------------------------------------
    def select_video(self, path, mime_type: Optional[str] = None) -> bool:
        """Store a video selection if its type is accepted."""
        flow = self.state.flow(Flow.UPLOAD)
        if flow.loading:
            return False

        selection = check_video(path, mime_type)
        if selection is None:
            self.state.upload.selection = None
            flow.settle(UPLOAD_REJECTED, MessageKind.ERROR)
            log(f"Rejected video {path} ({mime_type or 'unknown type'})", logging.DEBUG)
        else:
            self.state.upload.selection = selection
            flow.settle()
        self._notify()
        return selection is not None

    def upload_video(self) -> bool:
        """Post the selected video. Returns True if a request was sent."""
        flow = self.state.flow(Flow.UPLOAD)
        if flow.loading:
            return False

        selection = self.state.upload.selection
        if selection is None:
            flow.settle(UPLOAD_PROMPT, MessageKind.ERROR)
            self._notify()
            return False

        enable_ai = self.state.upload.enable_ai
        flow.start()
        self._notify()
        self.runner(
            lambda: self.client.upload_video(selection, enable_ai),
            lambda _result, error: self._on_video_uploaded(selection, error),
        )
        return True

    def _on_video_uploaded(self, selection, error: Optional[BaseException]) -> None:
        flow = self.state.flow(Flow.UPLOAD)
        if error is None:
            log(f"Uploaded {selection.filename}")
            self.state.upload.selection = None
            flow.settle(UPLOAD_SUCCESS, MessageKind.SUCCESS)
        elif isinstance(error, LiftConnectionError):
            log(f"Upload failed: {error}", logging.WARNING)
            flow.settle(CONNECTION_ERROR, MessageKind.ERROR)
        elif isinstance(error, LiftApiError):
            log(f"Upload failed: {error}", logging.WARNING)
            flow.settle(UPLOAD_FAILURE, MessageKind.ERROR)
        else:
            flow.settle()
            self._notify()
            raise error
        self._notify()
