"""
Smoke tests for configuration, client factories and runners.
These tests verify wiring without requiring a live backend.
"""

import logging
import time
from unittest.mock import MagicMock


# ===========================================================================
# Settings Tests
# ===========================================================================

class TestSettings:
    """Tests for liftlog/config.py."""

    def test_get_settings_returns_fresh_instance(self):
        from liftlog.config import get_settings

        first, second = get_settings(), get_settings()
        assert first is not second
        assert first.request_timeout > 0
        assert first.api_base_url


# ===========================================================================
# Client Factory Tests
# ===========================================================================

class TestClients:
    """Tests for gui/services/clients.py."""

    def test_get_lift_client_uses_settings(self):
        from gui.services.clients import get_lift_client
        from liftlog.config import Settings

        client = get_lift_client(Settings(api_base_url="http://lifts.local/", request_timeout=3))

        assert client.base_url == "http://lifts.local"
        assert client.timeout == 3


# ===========================================================================
# Runner Tests
# ===========================================================================

class TestRunners:
    """Tests for gui/utils/async_tasks.py."""

    def test_run_async_delivers_result(self):
        from gui.utils.async_tasks import run_async

        done = MagicMock()
        run_async(lambda: 42, done)

        done.assert_called_once_with(42, None)

    def test_run_async_delivers_error(self):
        from gui.utils.async_tasks import run_async

        error = KeyError("x")
        done = MagicMock()

        def boom():
            raise error

        run_async(boom, done)

        done.assert_called_once_with(None, error)

    def test_tk_runner_hands_back_through_after(self):
        from gui.utils.async_tasks import TkRunner

        root = MagicMock()
        root.after.side_effect = lambda _ms, callback: callback()
        done = MagicMock()

        runner = TkRunner(root)
        runner(lambda: "ok", done)

        # worker thread is a daemon; poll until it reports back
        for _ in range(200):
            if done.called:
                break
            time.sleep(0.01)
        done.assert_called_once_with("ok", None)
        root.after.assert_called_once()


# ===========================================================================
# Logging Tests
# ===========================================================================

class TestLogging:
    """Tests for gui/utils/logging.py and liftlog/utils/logger.py."""

    def test_gui_log_goes_to_named_logger(self, caplog):
        from gui.utils.logging import log

        with caplog.at_level(logging.INFO, logger="liftlog.gui"):
            log("hello lifter")

        assert "hello lifter" in caplog.text

    def test_get_logger_returns_named_logger(self):
        from liftlog.utils.logger import get_logger

        assert get_logger("liftlog.test").name == "liftlog.test"
