from __future__ import annotations

import logging
import threading
from typing import override

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Static

from padview.core.navigation import NavigationHost
from padview.models.drive import DriveInfo
from padview.models.enums import Button
from padview.models.view import ViewState
from padview.services.drive_monitor import DriveFeed
from padview.ui.render import DisplayGeometry, render_text

logger = logging.getLogger(__name__)

KEY_BUTTONS: dict[str, Button] = {
    "up": Button.UP,
    "down": Button.DOWN,
    "left": Button.LEFT,
    "right": Button.RIGHT,
    "enter": Button.CONFIRM,
    "escape": Button.BACK,
    "backspace": Button.BACK,
}

REFRESH_INTERVAL = 1 / 30


class PadApp(App[None]):
    """Desktop stand-in for the display and button pad.

    The Textual event loop is the render/input thread: keys become pad
    buttons, drive changes are marshalled onto it, and a short timer redraws
    the display whenever the host has a pending repaint request.
    """

    CSS = """
    Screen {
        align: center middle;
        background: #1d1f21;
    }
    #display {
        border: solid #81a2be;
        background: #000000;
        color: #8abeb7;
        padding: 0 0;
    }
    #status-row {
        width: auto;
        color: #969896;
        margin-top: 1;
    }
    """

    def __init__(self, host: NavigationHost, feed: DriveFeed, geometry: DisplayGeometry) -> None:
        super().__init__()
        self.host = host
        self.feed = feed
        self.geometry = geometry
        self._loop_thread: int | None = None
        self.rendered: ViewState | None = None

    @override
    def compose(self) -> ComposeResult:
        display = Static(id="display")
        display.styles.width = self.geometry.columns + 2
        display.styles.height = self.geometry.rows + 2
        yield Container(
            display,
            Static("arrows page/pan | Enter select | Esc back | q quit", id="status-row"),
        )

    def on_mount(self) -> None:
        self._loop_thread = threading.get_ident()
        self.render_state(self.host.view_state())
        self.set_interval(REFRESH_INTERVAL, self._refresh_display)
        self.feed.start(self._on_drives)

    def on_unmount(self) -> None:
        self.feed.stop()
        self.host.shutdown()

    def render_state(self, state: ViewState) -> None:
        self.rendered = state
        self.query_one("#display", Static).update(render_text(state, self.geometry))

    def _refresh_display(self) -> None:
        if self.host.consume_repaint():
            self.render_state(self.host.view_state())

    def _on_drives(self, drives: list[DriveInfo]) -> None:
        if threading.get_ident() == self._loop_thread:
            self.host.dispatch_drives_changed(drives)
        else:
            self.call_from_thread(self.host.dispatch_drives_changed, drives)

    @override
    def on_key(self, event: events.Key) -> None:  # type: ignore[override]
        if event.key in {"q", "ctrl+c"}:
            self.exit()
            return
        button = KEY_BUTTONS.get(event.key)
        if button is None:
            return
        event.stop()
        self.host.dispatch_button(button)
