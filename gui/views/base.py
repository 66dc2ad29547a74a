"""Base class for GUI views.

A view is a ``ttk.Frame`` bound to the shared ``LiftLogApp``. Subclasses
build their widgets in ``_build`` and redraw from state in ``render``.
"""

from __future__ import annotations

from tkinter import ttk


class BaseView(ttk.Frame):
    name = "base"
    title = ""

    def __init__(self, parent, app):
        super().__init__(parent, style="Main.TFrame", padding=12)
        self.app = app
        self._build()

    def _build(self):  # pragma: no cover - UI code
        raise NotImplementedError

    def render(self, state) -> None:  # pragma: no cover - UI code
        """Redraw from state. Called after every controller change."""

    def on_show(self) -> None:  # pragma: no cover - UI code
        """Hook for when the tab becomes visible."""

    def call(self, action: str, *args):
        """Invoke a controller action by name."""
        return getattr(self.app, action)(*args)

    def show_message(self, label: ttk.Label, flow_state) -> None:  # pragma: no cover - UI code
        kind = flow_state.kind.value if flow_state.kind else None
        style = {"success": "Success.TLabel", "error": "Error.TLabel"}.get(kind, "Muted.TLabel")
        label.configure(text=flow_state.message or "", style=style)
