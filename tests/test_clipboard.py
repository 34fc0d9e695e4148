import signal

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QTimer  # noqa: E402
from PySide6.QtGui import QGuiApplication  # noqa: E402

from strongpw import cli  # noqa: E402
from strongpw.clipboard import ClearReason, TransientClipboard, _application  # noqa: E402

SECRET = "Kd7m!xQ2-pR4tZ"


def test_clears_after_timeout():
    clip = TransientClipboard(timeout_s=0.05)
    assert clip.copy_and_wait(SECRET) is ClearReason.TIMEOUT
    assert QGuiApplication.clipboard().text() == ""


def test_cancel_clears_early():
    clip = TransientClipboard(timeout_s=30)
    QTimer.singleShot(20, clip.cancel)
    assert clip.copy_and_wait(SECRET) is ClearReason.CANCELLED
    assert QGuiApplication.clipboard().text() == ""


def test_signal_clears_and_restores_handler():
    before = signal.getsignal(signal.SIGTERM)
    clip = TransientClipboard(timeout_s=30)
    QTimer.singleShot(20, lambda: signal.raise_signal(signal.SIGTERM))

    assert clip.copy_and_wait(SECRET) is ClearReason.SIGNAL
    assert QGuiApplication.clipboard().text() == ""
    assert signal.getsignal(signal.SIGTERM) == before


def test_does_not_clear_foreign_content():
    clip = TransientClipboard(timeout_s=0.1)
    QTimer.singleShot(10, lambda: QGuiApplication.clipboard().setText("someone else"))

    assert clip.copy_and_wait(SECRET) is ClearReason.TIMEOUT
    assert QGuiApplication.clipboard().text() == "someone else"


def test_cli_exit_status_after_signal(capsys):
    _application()
    QTimer.singleShot(50, lambda: signal.raise_signal(signal.SIGTERM))

    assert cli.main(["-c", "--timeout", "30"]) == 128 + signal.SIGTERM
    assert capsys.readouterr().out == ""
    assert QGuiApplication.clipboard().text() == ""


def test_cli_exit_status_after_timeout():
    assert cli.main(["-c", "--timeout", "0.05"]) == 0
