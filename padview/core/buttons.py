from __future__ import annotations

from dataclasses import replace
from typing import Callable

from padview.core.publisher import RenderPublisher
from padview.models.enums import Button, InputMode
from padview.models.view import ViewState, max_line_offset


def page_up(state: ViewState, page_size: int) -> ViewState:
    if state.line_offset <= 0:
        return state
    return replace(state, line_offset=max(0, state.line_offset - page_size))


def page_down(state: ViewState, page_size: int) -> ViewState:
    if state.line_offset + page_size >= len(state.lines):
        return state
    return replace(state, line_offset=min(state.line_offset + page_size, max_line_offset(state, page_size)))


def pan_left(state: ViewState, step: int) -> ViewState:
    if state.x_offset >= 0:
        return state
    return replace(state, x_offset=min(0, state.x_offset + step))


def pan_right(state: ViewState, step: int) -> ViewState:
    # Unbounded on this side; content width is not known here.
    return replace(state, x_offset=state.x_offset - step)


def apply_button(state: ViewState, button: Button, page_size: int, step: int) -> ViewState:
    if button is Button.UP:
        return page_up(state, page_size)
    if button is Button.DOWN:
        return page_down(state, page_size)
    if button is Button.LEFT:
        return pan_left(state, step)
    if button is Button.RIGHT:
        return pan_right(state, step)
    return state


class ButtonStateMachine:
    """Pages and pans a published ViewState, but only once its task has settled."""

    def __init__(
        self,
        publisher: RenderPublisher,
        page_size: int,
        step: int,
        is_loading: Callable[[], bool],
        on_back: Callable[[], None],
        request_repaint: Callable[[], None],
    ) -> None:
        self._publisher = publisher
        self._page_size = max(1, page_size)
        self._step = step
        self._is_loading = is_loading
        self._on_back = on_back
        self._request_repaint = request_repaint

    @property
    def mode(self) -> InputMode:
        return InputMode.LOADING if self._is_loading() else InputMode.READY

    def handle(self, button: Button) -> None:
        if button is Button.BACK:
            self._on_back()
            return
        if self.mode is InputMode.LOADING:
            return
        current = self._publisher.current()
        updated = apply_button(current, button, self._page_size, self._step)
        if updated is not current:
            self._publisher.publish(updated)
        else:
            self._request_repaint()
