from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from padview.i18n.messages import Messages
from padview.models.drive import CancelCheck, DriveInfo, ListingResult
from padview.models.enums import Button
from padview.models.view import ViewState


@runtime_checkable
class Renderable(Protocol):
    def view_state(self) -> ViewState: ...


@runtime_checkable
class ButtonHandler(Protocol):
    def button_down(self, button: Button) -> None: ...


@runtime_checkable
class DeviceChangeAware(Protocol):
    def drives_changed(self, drives: list[DriveInfo]) -> None: ...


class Screen(Renderable, ButtonHandler, Protocol):
    def close(self) -> None: ...


class Lister(Protocol):
    def list_files(self, drive: DriveInfo, cancel_check: CancelCheck | None = None) -> ListingResult: ...


class Navigator(Protocol):
    def push_screen(self, screen: Screen) -> None: ...

    def pop_to_parent(self, screen: Screen | None = None) -> bool: ...

    def request_repaint(self) -> None: ...


@dataclass(slots=True, frozen=True)
class ScreenContext:
    """Everything a screen needs from the outside, handed over at construction."""

    navigator: Navigator
    executor: Executor
    lister: Lister
    messages: Messages
    page_size: int
    pan_step: int
