"""QTimer-backed scheduler for the quiz countdown."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTimerHandle:
    """Cancel handle wrapping a running QTimer."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler:
    """Schedules repeating callbacks on the Qt event loop."""

    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setInterval(int(interval_seconds * 1000))
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerHandle(timer)
