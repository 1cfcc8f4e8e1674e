from __future__ import annotations

from typing import Callable

from padview.models.view import ViewState


class RenderPublisher:
    """Holds the ViewState the render path draws.

    ``publish`` is a single reference assignment, so a concurrent ``current``
    returns either the previous or the new snapshot, never a mix. ViewState is
    frozen, so a published snapshot cannot change underneath the reader.
    """

    __slots__ = ("_state", "_request_repaint")

    def __init__(self, initial: ViewState, request_repaint: Callable[[], None]) -> None:
        self._state = initial
        self._request_repaint = request_repaint

    def current(self) -> ViewState:
        return self._state

    def publish(self, state: ViewState) -> None:
        self._state = state
        self._request_repaint()
