"""Theme primitives for the GUI.

A theme is a frozen palette; ``configure_styles`` maps it onto the named ttk
styles the views use (``Header.TLabel``, ``Muted.TLabel``, ``Panel.TFrame``...).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    surface_color: str = "#f3f4f6"  # gray-100
    muted_color: str = "#6b7280"  # gray-500
    success_color: str = "#16a34a"  # green-600
    error_color: str = "#dc2626"  # red-600


@dataclass(frozen=True)
class ModernTheme(Theme):
    """Dark palette used by default."""

    name: str = "Modern"
    background_color: str = "#0b1220"  # dark
    primary_color: str = "#e5e7eb"  # gray-200
    accent_color: str = "#22c55e"  # green-500
    surface_color: str = "#111827"  # gray-900
    muted_color: str = "#9ca3af"  # gray-400
    success_color: str = "#4ade80"  # green-400
    error_color: str = "#f87171"  # red-400


def configure_styles(style, theme: Theme) -> None:  # pragma: no cover - UI code
    """Register the named ttk styles for ``theme`` on a ``ttk.Style``."""
    bg, fg = theme.background_color, theme.primary_color
    surface = theme.surface_color

    style.theme_use("clam")
    style.configure("TFrame", background=bg)
    style.configure("Main.TFrame", background=bg)
    style.configure("Panel.TFrame", background=surface)
    style.configure("TLabel", background=bg, foreground=fg)
    style.configure("Header.TLabel", background=bg, foreground=fg, font=("Inter", 16, "bold"))
    style.configure("Muted.TLabel", background=bg, foreground=theme.muted_color)
    style.configure("CardValue.TLabel", background=surface, foreground=fg, font=("Inter", 20, "bold"))
    style.configure("CardLabel.TLabel", background=surface, foreground=theme.muted_color)
    style.configure("Success.TLabel", background=bg, foreground=theme.success_color)
    style.configure("Error.TLabel", background=bg, foreground=theme.error_color)
    style.configure("TButton", padding=6)
    style.configure("Accent.TButton", background=theme.accent_color, foreground=bg)
    style.configure("TCheckbutton", background=bg, foreground=fg)
    style.configure("TNotebook", background=bg)
    style.configure("TNotebook.Tab", padding=[12, 4])
    style.configure("Panel.TLabelframe", background=bg)
    style.configure("Panel.TLabelframe.Label", background=bg, foreground=fg)
    style.configure("Treeview", background=surface, foreground=fg, fieldbackground=surface)
    style.configure("Treeview.Heading", background=bg, foreground=fg)
