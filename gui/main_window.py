#!/usr/bin/env python3
"""
LiftLog GUI - Tk window hosting the four tabs.
"""
import tkinter as tk
from tkinter import ttk

from gui.app import LiftLogApp
from gui.components.status_bar import StatusBar
from gui.services.clients import get_lift_client
from gui.state import Tab
from gui.theme import ModernTheme, configure_styles
from gui.utils.async_tasks import TkRunner
from gui.views.dashboard import DashboardView
from gui.views.history import HistoryView
from gui.views.log_lift import LogLiftView
from gui.views.upload_video import UploadVideoView
from liftlog.config import get_settings
from liftlog.utils.logger import get_logger, setup_logging

VIEW_CLASSES = (DashboardView, LogLiftView, UploadVideoView, HistoryView)

logger = get_logger(__name__)


class MainWindow:
    """Binds a LiftLogApp to a notebook with one view per tab."""

    def __init__(self, root: tk.Tk, app: LiftLogApp, backend_url: str = ""):
        self.root = root
        self.app = app

        self.style = ttk.Style()
        self.theme = ModernTheme()
        configure_styles(self.style, self.theme)
        self.root.configure(bg=self.theme.background_color)

        main_frame = ttk.Frame(root, style="Main.TFrame", padding=8)
        main_frame.pack(fill=tk.BOTH, expand=True)

        self.notebook = ttk.Notebook(main_frame)
        self.notebook.pack(fill=tk.BOTH, expand=True)
        self.views = {}
        for view_cls in VIEW_CLASSES:
            view = view_cls(self.notebook, app)
            self.notebook.add(view, text=view.title)
            self.views[Tab(view.name)] = view
        self.notebook.bind('<<NotebookTabChanged>>', self._on_tab_changed)

        self.status_bar = StatusBar(root, backend_url=backend_url)
        self.status_bar.pack(fill=tk.X, side=tk.BOTTOM)

        app.subscribe(self.render)
        self.render(app.state)

    def _on_tab_changed(self, _event=None):
        selected = self.notebook.nametowidget(self.notebook.select())
        if selected.name != self.app.state.current_view.value:
            self.app.switch_view(selected.name)
        selected.on_show()

    def render(self, state):
        active = self.views[state.current_view]
        if self.notebook.select() != str(active):
            self.notebook.select(active)
        for view in self.views.values():
            view.render(state)
        self.status_bar.update_status(state)


def main():
    """Run the GUI application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    root = tk.Tk()
    root.title("LiftLog - Powerlifting Tracker")
    root.geometry(settings.window_geometry)
    root.minsize(800, 560)

    app = LiftLogApp(
        client=get_lift_client(settings),
        runner=TkRunner(root),
        verbose=settings.verbose,
    )
    MainWindow(root, app, backend_url=settings.api_base_url)
    logger.info("Using backend %s", settings.api_base_url)
    root.after(100, app.mount)
    root.mainloop()


if __name__ == "__main__":
    main()
