import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from gui.components.stat_card import StatCard
from gui.state import Flow
from gui.views.base import BaseView
from liftlog.models.schemas import LiftRecord, LiftType

MISSING = "—"


def format_weight(weight: Optional[float]) -> str:
    return f"{weight:g} kg" if weight is not None else MISSING


def lift_row(lift: LiftRecord) -> Tuple[str, str, str, str]:
    """Treeview values for one record: date, lift, weight, reps."""
    reps = str(lift.reps) if lift.reps is not None else MISSING
    return (lift.date or MISSING, lift.lift_label, format_weight(lift.weight), reps)


class DashboardView(BaseView):
    name = "dashboard"
    title = "Dashboard"

    def _build(self):  # pragma: no cover - UI code
        hero = ttk.Frame(self, style="Main.TFrame")
        hero.pack(fill="x", pady=(0, 8))
        ttk.Label(hero, text="Dashboard", style="Header.TLabel").pack(anchor="w")
        ttk.Label(hero, text="Your training at a glance", style="Muted.TLabel").pack(anchor="w")

        stats_frame = ttk.Frame(self, style="Main.TFrame")
        stats_frame.pack(fill="x")
        stats_frame.columnconfigure((0, 1, 2), weight=1, uniform="stat")

        self.cards = {
            'total': StatCard(stats_frame, "Total Lifts", "🏋", 0),
            'month': StatCard(stats_frame, "This Month", "📅", 0),
            'max': StatCard(stats_frame, "Max Weight", "🏆", format_weight(0)),
        }
        for idx, card in enumerate(self.cards.values()):
            card.grid(row=0, column=idx, padx=4, pady=4, sticky="nsew")

        # Heaviest set per lift
        bests = ttk.LabelFrame(self, text="Best Lifts", padding=8, style="Panel.TLabelframe")
        bests.pack(fill="x", pady=(10, 4))
        bests.columnconfigure((0, 1, 2), weight=1)
        self.best_labels = {}
        for idx, lift in enumerate(LiftType):
            label = ttk.Label(bests, text=f"{lift.label}: —", style="Muted.TLabel")
            label.grid(row=0, column=idx, sticky="w", pady=2)
            self.best_labels[lift.value] = label

        recent = ttk.LabelFrame(self, text="Recent Lifts", padding=8, style="Panel.TLabelframe")
        recent.pack(fill="both", expand=True, pady=(4, 8))
        recent.columnconfigure(0, weight=1)
        recent.rowconfigure(0, weight=1)

        cols = ("date", "lift", "weight", "reps")
        self.recent_tree = ttk.Treeview(recent, columns=cols, show="headings", height=5, style="Treeview")
        for col, heading, width in (
            ("date", "Date", 110),
            ("lift", "Lift", 140),
            ("weight", "Weight", 90),
            ("reps", "Reps", 70),
        ):
            self.recent_tree.heading(col, text=heading)
            self.recent_tree.column(col, width=width, anchor="center")
        self.recent_tree.grid(row=0, column=0, sticky="nsew")

        quick_actions = ttk.Frame(self, style="Main.TFrame")
        quick_actions.pack(fill="x", pady=(8, 0))
        ttk.Button(quick_actions, text="➕ Log a Lift", style="Accent.TButton",
                   command=lambda: self.call('switch_view', 'log-lift')).pack(side="left", padx=3)
        ttk.Button(quick_actions, text="🎥 Upload Video",
                   command=lambda: self.call('switch_view', 'upload-video')).pack(side="left", padx=3)
        self.refresh_btn = ttk.Button(quick_actions, text="↻ Refresh",
                                      command=lambda: self.call('load_history'))
        self.refresh_btn.pack(side="left", padx=3)

        self.next_steps = ttk.Label(self, text="", style="Muted.TLabel")
        self.next_steps.pack(anchor="w", pady=(6, 0))

    def render(self, state):  # pragma: no cover - UI code
        stats = self.app.dashboard_stats()
        self.cards['total'].update_value(stats.total_lifts)
        self.cards['month'].update_value(stats.this_month)
        self.cards['max'].update_value(format_weight(stats.max_weight))

        for lift in LiftType:
            best = stats.best_by_lift.get(lift.value)
            text = format_weight(best) if best is not None else "—"
            self.best_labels[lift.value].configure(text=f"{lift.label}: {text}")

        for item in self.recent_tree.get_children():
            self.recent_tree.delete(item)
        for lift in stats.recent:
            self.recent_tree.insert('', 'end', values=lift_row(lift))

        loading = state.flow(Flow.HISTORY).loading
        self.refresh_btn.configure(state=tk.DISABLED if loading else tk.NORMAL)
        if loading:
            self.next_steps.configure(text="Loading your lifts…")
        elif stats.total_lifts == 0:
            self.next_steps.configure(text="📥 No lifts yet. Log your first lift to get started.")
        else:
            self.next_steps.configure(text="")
