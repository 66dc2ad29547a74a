"""Application state container.

All mutable UI state lives here. Only the controller in `gui.app` writes to
it; views read it when they re-render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from liftlog.models.schemas import LiftRecord, LiftType, UploadSelection


class Tab(str, Enum):
    DASHBOARD = "dashboard"
    LOG_LIFT = "log-lift"
    UPLOAD_VIDEO = "upload-video"
    HISTORY = "history"


class Flow(str, Enum):
    HISTORY = "history"
    LOG_LIFT = "log_lift"
    UPLOAD = "upload"


class MessageKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FlowState:
    """idle -> pending -> settled(success|failure) for one request flow."""

    loading: bool = False
    message: Optional[str] = None
    kind: Optional[MessageKind] = None

    def start(self) -> None:
        self.loading = True
        self.message = None
        self.kind = None

    def settle(self, message: Optional[str] = None, kind: Optional[MessageKind] = None) -> None:
        self.loading = False
        self.message = message
        self.kind = kind if message else None


@dataclass
class LiftForm:
    lift_type: str = LiftType.SQUAT.value
    weight: str = ""
    reps: str = ""
    date: str = field(default_factory=lambda: date.today().isoformat())


@dataclass
class UploadState:
    selection: Optional[UploadSelection] = None
    enable_ai: bool = False


@dataclass
class AppState:
    """Holds ephemeral UI state. Nothing here survives a restart."""

    current_view: Tab = Tab.DASHBOARD
    lifts: List[LiftRecord] = field(default_factory=list)
    form: LiftForm = field(default_factory=LiftForm)
    upload: UploadState = field(default_factory=UploadState)
    flows: Dict[Flow, FlowState] = field(
        default_factory=lambda: {flow: FlowState() for flow in Flow}
    )

    def flow(self, flow: Flow) -> FlowState:
        return self.flows[flow]

    @property
    def is_busy(self) -> bool:
        return any(f.loading for f in self.flows.values())

    @property
    def status_message(self) -> str:
        """Most relevant message for the status bar."""
        if self.is_busy:
            return "Working..."
        for flow in (Flow.LOG_LIFT, Flow.UPLOAD):
            message = self.flows[flow].message
            if message:
                return message
        return f"{len(self.lifts)} lifts loaded"
