from __future__ import annotations

from dataclasses import replace

from padview.core.buttons import pan_left, pan_right
from padview.core.publisher import RenderPublisher
from padview.core.screen import ScreenContext
from padview.i18n.messages import Msg
from padview.models.drive import DriveInfo
from padview.models.enums import Button
from padview.models.view import ViewState, max_line_offset
from padview.screens.view_screen import ViewScreen


class DriveMenuScreen:
    """Pick one of the attached drives to list its files."""

    def __init__(self, ctx: ScreenContext) -> None:
        self._ctx = ctx
        self._drives: list[DriveInfo] = []
        self._selected = 0
        self._publisher = RenderPublisher(self._build_state(), ctx.navigator.request_repaint)

    @property
    def selected(self) -> DriveInfo | None:
        if not self._drives:
            return None
        return self._drives[self._selected]

    def view_state(self) -> ViewState:
        return self._publisher.current()

    def button_down(self, button: Button) -> None:
        if button is Button.BACK:
            self._ctx.navigator.pop_to_parent(self)
            return
        if button is Button.UP and self._selected > 0:
            self._selected -= 1
        elif button is Button.DOWN and self._selected < len(self._drives) - 1:
            self._selected += 1
        elif button is Button.CONFIRM and self._drives:
            self._ctx.navigator.push_screen(ViewScreen(self._ctx, self._drives[self._selected]))
            return
        elif button is Button.LEFT:
            self._publisher.publish(pan_left(self._publisher.current(), self._ctx.pan_step))
            return
        elif button is Button.RIGHT:
            self._publisher.publish(pan_right(self._publisher.current(), self._ctx.pan_step))
            return
        self._publisher.publish(self._build_state(self._publisher.current().x_offset))

    def drives_changed(self, drives: list[DriveInfo]) -> None:
        previous = self.selected
        self._drives = list(drives)
        self._selected = 0
        if previous is not None:
            for index, drive in enumerate(self._drives):
                if drive.same_drive(previous):
                    self._selected = index
                    break
        self._publisher.publish(self._build_state(self._publisher.current().x_offset))

    def close(self) -> None:
        pass

    def _build_state(self, x_offset: int = 0) -> ViewState:
        messages = self._ctx.messages
        lines = [messages.get(Msg.SELECT_DRIVE)]
        if not self._drives:
            lines.append(messages.get(Msg.NO_DRIVES))
            return ViewState(lines=tuple(lines), x_offset=x_offset)
        for index, drive in enumerate(self._drives):
            marker = ">" if index == self._selected else " "
            if drive.is_mounted:
                text = messages.get(Msg.DRIVE_ENTRY, drive.port, drive.label)
            else:
                text = messages.get(Msg.DRIVE_UNMOUNTED, drive.port)
            lines.append(f"{marker}{text.rstrip()}")
        state = ViewState.of(lines)
        page = self._ctx.page_size
        offset = min(((self._selected + 1) // page) * page, max_line_offset(state, page))
        return replace(state, line_offset=offset, x_offset=x_offset)
