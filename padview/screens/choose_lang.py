from __future__ import annotations

import logging
from dataclasses import replace

from padview.core.buttons import pan_left, pan_right
from padview.core.publisher import RenderPublisher
from padview.core.screen import ScreenContext
from padview.i18n.messages import LANGUAGE_NAMES, Messages, Msg, available_languages
from padview.models.enums import Button
from padview.models.view import ViewState, max_line_offset
from padview.screens.drive_menu import DriveMenuScreen

logger = logging.getLogger(__name__)


class ChooseLangScreen:
    """Root screen: pick the display language, then move on to the drive menu.

    The header is shown in the currently selected language, so moving the
    selection previews the choice.
    """

    def __init__(self, ctx: ScreenContext) -> None:
        self._ctx = ctx
        self._languages = available_languages()
        current = ctx.messages.language
        self._selected = self._languages.index(current) if current in self._languages else 0
        self._publisher = RenderPublisher(self._build_state(), ctx.navigator.request_repaint)

    @property
    def selected(self) -> str:
        return self._languages[self._selected]

    def view_state(self) -> ViewState:
        return self._publisher.current()

    def button_down(self, button: Button) -> None:
        if button is Button.UP and self._selected > 0:
            self._selected -= 1
        elif button is Button.DOWN and self._selected < len(self._languages) - 1:
            self._selected += 1
        elif button is Button.CONFIRM:
            language = self.selected
            logger.info("Language set to %s", language)
            ctx = replace(self._ctx, messages=Messages(language))
            self._ctx.navigator.push_screen(DriveMenuScreen(ctx))
            return
        elif button is Button.LEFT:
            self._publisher.publish(pan_left(self._publisher.current(), self._ctx.pan_step))
            return
        elif button is Button.RIGHT:
            self._publisher.publish(pan_right(self._publisher.current(), self._ctx.pan_step))
            return
        self._publisher.publish(self._build_state(self._publisher.current().x_offset))

    def close(self) -> None:
        pass

    def _build_state(self, x_offset: int = 0) -> ViewState:
        header = Messages(self.selected).get(Msg.CHOOSE_LANGUAGE)
        lines = [header]
        for index, language in enumerate(self._languages):
            marker = ">" if index == self._selected else " "
            lines.append(f"{marker}{LANGUAGE_NAMES.get(language, language)}")
        state = ViewState.of(lines)
        page = self._ctx.page_size
        offset = min(((self._selected + 1) // page) * page, max_line_offset(state, page))
        return replace(state, line_offset=offset, x_offset=x_offset)
