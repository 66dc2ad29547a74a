"""Stat card component: an icon, a big value and a caption."""

import tkinter as tk
from tkinter import ttk


class StatCard(ttk.Frame):
    def __init__(self, parent, label: str, icon: str = "", value="—"):
        super().__init__(parent, style="Panel.TFrame", padding=(12, 10))
        self.value_var = tk.StringVar(value=str(value))
        ttk.Label(self, text=f"{icon} {label}".strip(), style="CardLabel.TLabel").pack(anchor="w")
        ttk.Label(self, textvariable=self.value_var, style="CardValue.TLabel").pack(anchor="w", pady=(4, 0))

    def update_value(self, value) -> None:
        self.value_var.set(str(value))
