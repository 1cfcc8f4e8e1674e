from __future__ import annotations

import logging
import threading

from padview.core.screen import DeviceChangeAware, Screen
from padview.models.drive import DriveInfo
from padview.models.enums import Button
from padview.models.view import ViewState

logger = logging.getLogger(__name__)


class NavigationHost:
    """Screen stack for a single display.

    All methods except ``request_repaint`` belong to the render/input thread.
    The host remembers the last device list and hands it to whichever screen
    becomes current, so a new screen does not wait for the next device change.
    """

    def __init__(self) -> None:
        self._stack: list[Screen] = []
        self._repaint = threading.Event()
        self._drives: list[DriveInfo] | None = None

    @property
    def current(self) -> Screen | None:
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push_screen(self, screen: Screen) -> None:
        self._stack.append(screen)
        logger.debug("Pushed %s (depth %d)", type(screen).__name__, len(self._stack))
        self._deliver_drives(screen)
        self.request_repaint()

    def pop_to_parent(self, screen: Screen | None = None) -> bool:
        """Close *screen* (default: the current one) and every screen above it.

        The root screen is never popped.
        """
        target = screen if screen is not None else self.current
        if target is None or target not in self._stack:
            return False
        index = self._stack.index(target)
        if index == 0:
            return False
        while len(self._stack) > index:
            popped = self._stack.pop()
            popped.close()
            logger.debug("Popped %s (depth %d)", type(popped).__name__, len(self._stack))
        current = self.current
        if current is not None:
            self._deliver_drives(current)
        self.request_repaint()
        return True

    def request_repaint(self) -> None:
        self._repaint.set()

    def consume_repaint(self) -> bool:
        if not self._repaint.is_set():
            return False
        self._repaint.clear()
        return True

    def view_state(self) -> ViewState:
        current = self.current
        return current.view_state() if current is not None else ViewState()

    def dispatch_button(self, button: Button) -> None:
        current = self.current
        if current is not None:
            current.button_down(button)

    def dispatch_drives_changed(self, drives: list[DriveInfo]) -> None:
        self._drives = list(drives)
        logger.info("Drives changed: %s", ", ".join(d.port for d in drives) or "none")
        current = self.current
        if current is not None:
            self._deliver_drives(current)

    def shutdown(self) -> None:
        while self._stack:
            self._stack.pop().close()

    def _deliver_drives(self, screen: Screen) -> None:
        if self._drives is not None and isinstance(screen, DeviceChangeAware):
            screen.drives_changed(list(self._drives))
