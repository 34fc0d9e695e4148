"""
Transient clipboard: copy a password, clear it again after a timeout.

The Qt event loop runs until the timeout fires, cancel() is called, or the
process receives SIGINT / SIGTERM (SIGHUP where available). Whatever ends
the wait, the clipboard is cleared if it still holds our password and the
previous signal handlers are restored.
"""

from __future__ import annotations

import enum
import signal
import sys
from typing import Any, Dict

from loguru import logger
from PySide6.QtCore import QTimer
from PySide6.QtGui import QGuiApplication

# Python signal handlers only run between bytecodes; while Qt's loop sits in
# C++ this timer hands control back to the interpreter.
_SIGNAL_POLL_MS = 200

_CLEAR_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP")
    if hasattr(signal, name)
)


class ClearReason(enum.Enum):
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    SIGNAL = "signal"


def _application() -> QGuiApplication:
    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv[:1])
    return app  # type: ignore[return-value]


class TransientClipboard:
    def __init__(self, timeout_s: float = 15.0) -> None:
        self.timeout_ms = max(0, int(timeout_s * 1000))
        self._app = _application()
        self._secret: str | None = None
        self._reason: ClearReason | None = None
        # Signal number that ended the last wait, if any.
        self.last_signal: int | None = None

    def copy_and_wait(self, secret: str) -> ClearReason:
        """
        Put `secret` on the clipboard and block until it is cleared.
        """
        clipboard = QGuiApplication.clipboard()
        self._secret = secret
        self._reason = None
        self.last_signal = None

        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._finish(ClearReason.TIMEOUT))

        pulse = QTimer()
        pulse.timeout.connect(lambda: None)

        previous: Dict[int, Any] = {}
        for signum in _CLEAR_SIGNALS:
            try:
                previous[signum] = signal.signal(signum, self._on_signal)
            except ValueError:
                # Not the main thread; rely on timeout / cancel only.
                break

        try:
            clipboard.setText(secret)
            logger.debug("Password copied, clearing in {} ms", self.timeout_ms)
            timer.start(self.timeout_ms)
            pulse.start(_SIGNAL_POLL_MS)
            if self._reason is None:
                self._app.exec()
        finally:
            timer.stop()
            pulse.stop()
            self.clear()
            for signum, handler in previous.items():
                signal.signal(signum, handler)

        reason = self._reason or ClearReason.CANCELLED
        logger.debug("Clipboard cleared ({})", reason.value)
        return reason

    def cancel(self) -> None:
        """Clear early. Safe to call from a Qt callback or a signal handler."""
        self._finish(ClearReason.CANCELLED)

    def clear(self) -> None:
        """
        Clear the clipboard if it still holds a value we placed.
        """
        if self._secret is None:
            return
        clipboard = QGuiApplication.clipboard()
        if clipboard.text() == self._secret:
            clipboard.clear()
        self._secret = None

    def _on_signal(self, signum: int, _frame: object) -> None:
        if self._reason is None:
            self.last_signal = signum
        self._finish(ClearReason.SIGNAL)

    def _finish(self, reason: ClearReason) -> None:
        if self._reason is None:
            self._reason = reason
        self.clear()
        self._app.quit()
