import tkinter as tk
from tkinter import ttk

from gui.state import Flow
from gui.views.base import BaseView
from liftlog.models.schemas import LiftType


class LogLiftView(BaseView):
    """Form for recording a single lift."""

    name = "log-lift"
    title = "Log Lift"

    def _build(self):  # pragma: no cover - UI code
        ttk.Label(self, text="Log a Lift", style="Header.TLabel").pack(anchor="w")
        ttk.Label(self, text="Record a squat, bench or deadlift set", style="Muted.TLabel").pack(anchor="w", pady=(0, 10))

        form = ttk.Frame(self, style="Main.TFrame")
        form.pack(anchor="w")

        form_state = self.app.state.form
        self._labels_by_value = {lift.value: lift.label for lift in LiftType}
        self._values_by_label = {lift.label: lift.value for lift in LiftType}

        self.vars = {
            'lift_type': tk.StringVar(value=self._labels_by_value.get(form_state.lift_type, "")),
            'weight': tk.StringVar(value=form_state.weight),
            'reps': tk.StringVar(value=form_state.reps),
            'date': tk.StringVar(value=form_state.date),
        }

        ttk.Label(form, text="Lift", style="Muted.TLabel").grid(row=0, column=0, sticky="w", pady=4)
        ttk.Combobox(form, textvariable=self.vars['lift_type'], state="readonly", width=22,
                     values=list(self._values_by_label)).grid(row=0, column=1, sticky="w", padx=(8, 0))

        ttk.Label(form, text="Weight (kg)", style="Muted.TLabel").grid(row=1, column=0, sticky="w", pady=4)
        ttk.Entry(form, textvariable=self.vars['weight'], width=24).grid(row=1, column=1, sticky="w", padx=(8, 0))

        ttk.Label(form, text="Reps", style="Muted.TLabel").grid(row=2, column=0, sticky="w", pady=4)
        ttk.Entry(form, textvariable=self.vars['reps'], width=24).grid(row=2, column=1, sticky="w", padx=(8, 0))

        ttk.Label(form, text="Date (YYYY-MM-DD)", style="Muted.TLabel").grid(row=3, column=0, sticky="w", pady=4)
        ttk.Entry(form, textvariable=self.vars['date'], width=24).grid(row=3, column=1, sticky="w", padx=(8, 0))

        for field_name, var in self.vars.items():
            var.trace_add("write", lambda *_a, f=field_name: self._on_edit(f))

        self.submit_btn = ttk.Button(self, text="Log Lift", style="Accent.TButton", command=self._on_submit)
        self.submit_btn.pack(anchor="w", pady=(12, 4))
        self.message_label = ttk.Label(self, text="", style="Muted.TLabel")
        self.message_label.pack(anchor="w")

    def _on_edit(self, field_name):  # pragma: no cover - UI code
        value = self.vars[field_name].get()
        if field_name == 'lift_type':
            value = self._values_by_label.get(value, value)
        self.app.update_form(**{field_name: value})

    def _on_submit(self):  # pragma: no cover - UI code
        self.call('submit_lift')

    def render(self, state):  # pragma: no cover - UI code
        form_state = state.form
        current = {
            'lift_type': self._labels_by_value.get(form_state.lift_type, form_state.lift_type),
            'weight': form_state.weight,
            'reps': form_state.reps,
            'date': form_state.date,
        }
        for field_name, value in current.items():
            if self.vars[field_name].get() != value:
                self.vars[field_name].set(value)

        flow = state.flow(Flow.LOG_LIFT)
        self.submit_btn.configure(state=tk.DISABLED if flow.loading else tk.NORMAL,
                                  text="Logging…" if flow.loading else "Log Lift")
        self.show_message(self.message_label, flow)
