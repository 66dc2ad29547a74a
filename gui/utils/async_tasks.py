"""Async helpers.

A runner takes a blocking ``work`` callable and a ``done(result, error)``
callback. ``run_async`` executes both immediately on the calling thread and
is what the tests use. ``TkRunner`` moves the work to a daemon thread and
hands the outcome back to the Tk event loop with ``after``.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

Done = Callable[[Any, Optional[BaseException]], None]


def run_async(work: Callable[[], Any], done: Done) -> None:
    try:
        result = work()
    except Exception as exc:
        done(None, exc)
        return
    done(result, None)


class TkRunner:
    """Run work in a background thread and deliver results on the Tk thread."""

    def __init__(self, root):
        self.root = root

    def __call__(self, work: Callable[[], Any], done: Done) -> None:
        def wrapper():
            try:
                result = work()
            except Exception as exc:
                self.root.after(0, lambda e=exc: done(None, e))
                return
            self.root.after(0, lambda res=result: done(res, None))

        thread = threading.Thread(target=wrapper, daemon=True)
        thread.start()
