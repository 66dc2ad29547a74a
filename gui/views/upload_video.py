import tkinter as tk
from tkinter import filedialog, ttk

from gui.state import Flow
from gui.views.base import BaseView

VIDEO_FILETYPES = [
    ("Video files", "*.mp4 *.avi *.mov *.wmv *.webm"),
    ("All files", "*.*"),
]


class UploadVideoView(BaseView):
    """Pick a training video and send it for optional AI analysis."""

    name = "upload-video"
    title = "Upload Video"

    def _build(self):  # pragma: no cover - UI code
        ttk.Label(self, text="Upload Training Video", style="Header.TLabel").pack(anchor="w")
        ttk.Label(self, text="MP4, AVI, MOV, WMV or WebM", style="Muted.TLabel").pack(anchor="w", pady=(0, 10))

        picker = ttk.Frame(self, style="Main.TFrame")
        picker.pack(fill="x")
        self.choose_btn = ttk.Button(picker, text="📂 Choose File…", command=self._on_choose)
        self.choose_btn.pack(side="left")
        self.file_label = ttk.Label(picker, text="No file selected", style="Muted.TLabel")
        self.file_label.pack(side="left", padx=(10, 0))

        self.ai_var = tk.BooleanVar(value=self.app.state.upload.enable_ai)
        ttk.Checkbutton(self, text="Enable AI form analysis", variable=self.ai_var,
                        command=lambda: self.call('set_enable_ai', self.ai_var.get())).pack(anchor="w", pady=(10, 0))

        self.upload_btn = ttk.Button(self, text="Upload Video", style="Accent.TButton",
                                     command=lambda: self.call('upload_video'))
        self.upload_btn.pack(anchor="w", pady=(12, 4))
        self.message_label = ttk.Label(self, text="", style="Muted.TLabel")
        self.message_label.pack(anchor="w")

    def _on_choose(self):  # pragma: no cover - UI code
        path = filedialog.askopenfilename(title="Select training video", filetypes=VIDEO_FILETYPES)
        if path:
            self.call('select_video', path)

    def render(self, state):  # pragma: no cover - UI code
        selection = state.upload.selection
        self.file_label.configure(text=selection.filename if selection else "No file selected")
        self.ai_var.set(state.upload.enable_ai)

        flow = state.flow(Flow.UPLOAD)
        busy = tk.DISABLED if flow.loading else tk.NORMAL
        self.choose_btn.configure(state=busy)
        self.upload_btn.configure(state=busy, text="Uploading…" if flow.loading else "Upload Video")
        self.show_message(self.message_label, flow)
