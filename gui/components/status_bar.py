import tkinter as tk
from tkinter import ttk

from gui.state import AppState, Flow


class StatusBar(ttk.Frame):
    """
    Bottom status strip.

    Displays: latest flow message, how many lifts are cached, the backend
    URL, and a busy indicator while any request is outstanding.
    """

    def __init__(self, parent, backend_url: str = ""):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))

        # Status message (left side)
        self.message_var = tk.StringVar(value="Ready")
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        # Metrics container (right side)
        metrics_frame = ttk.Frame(self, style="Panel.TFrame")
        metrics_frame.pack(side=tk.RIGHT)

        # Busy indicator
        self.busy_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.busy_var,
                  style="Muted.TLabel", width=2).pack(side=tk.RIGHT, padx=(4, 0))

        self.count_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.count_var,
                  style="Muted.TLabel", width=12).pack(side=tk.RIGHT, padx=(8, 0))

        self.backend_var = tk.StringVar(value=f"[{backend_url}]" if backend_url else "")
        ttk.Label(metrics_frame, textvariable=self.backend_var,
                  style="Muted.TLabel").pack(side=tk.RIGHT, padx=(8, 0))

    def update_status(self, state: AppState):
        """Refresh status bar from app state."""
        self.message_var.set(state.status_message)
        self.busy_var.set("●" if state.is_busy else "")
        if state.flow(Flow.HISTORY).loading:
            self.count_var.set("loading…")
        else:
            self.count_var.set(f"{len(state.lifts)} lifts")
