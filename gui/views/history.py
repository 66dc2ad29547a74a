import tkinter as tk
from tkinter import ttk

from gui.state import Flow
from gui.views.base import BaseView
from gui.views.dashboard import format_weight, lift_row


class HistoryView(BaseView):
    """Every cached lift, in the order the backend returned them."""

    name = "history"
    title = "History"

    def _build(self):  # pragma: no cover - UI code
        header = ttk.Frame(self, style="Main.TFrame")
        header.pack(fill="x", pady=(0, 8))
        ttk.Label(header, text="Lift History", style="Header.TLabel").pack(side="left")
        self.refresh_btn = ttk.Button(header, text="↻ Refresh", command=lambda: self.call('load_history'))
        self.refresh_btn.pack(side="right")

        self.summary = ttk.Label(self, text="", style="Muted.TLabel")
        self.summary.pack(anchor="w", pady=(0, 6))

        body = ttk.Frame(self, style="Main.TFrame")
        body.pack(fill="both", expand=True)
        body.columnconfigure(0, weight=1)
        body.rowconfigure(0, weight=1)

        cols = ("date", "lift", "weight", "reps")
        self.tree = ttk.Treeview(body, columns=cols, show="headings", style="Treeview")
        self.tree.heading("date", text="Date")
        self.tree.heading("lift", text="Lift")
        self.tree.heading("weight", text="Weight")
        self.tree.heading("reps", text="Reps")
        self.tree.column("date", width=120, anchor="center")
        self.tree.column("lift", width=160, anchor="w")
        self.tree.column("weight", width=100, anchor="center")
        self.tree.column("reps", width=80, anchor="center")
        self.tree.grid(row=0, column=0, sticky="nsew")

        scroll = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.tree.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        self.tree.configure(yscrollcommand=scroll.set)

    def render(self, state):
        for item in self.tree.get_children():
            self.tree.delete(item)
        for lift in state.lifts:
            self.tree.insert('', 'end', values=lift_row(lift))

        stats = self.app.dashboard_stats()
        loading = state.flow(Flow.HISTORY).loading
        self.refresh_btn.configure(state=tk.DISABLED if loading else tk.NORMAL)
        if loading:
            self.summary.configure(text="Loading…")
        elif not state.lifts:
            self.summary.configure(text="No lifts recorded yet.")
        else:
            self.summary.configure(
                text=f"{stats.total_lifts} lifts · {stats.this_month} this month · max {format_weight(stats.max_weight)}"
            )
