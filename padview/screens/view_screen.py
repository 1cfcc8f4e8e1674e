from __future__ import annotations

import logging
from dataclasses import dataclass

from result import Err, Ok, Result

from padview.core.buttons import ButtonStateMachine
from padview.core.publisher import RenderPublisher
from padview.core.screen import ScreenContext
from padview.core.tasks import CancelToken, TaskBinding
from padview.i18n.messages import Msg
from padview.models.drive import DriveInfo, ListingError, ListingErrorCode, find_drive
from padview.models.enums import Button, InputMode
from padview.models.view import ViewState

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ListingFailure:
    """A failed listing together with the drive reference it was submitted for."""

    drive: DriveInfo
    error: ListingError | Exception


class ViewScreen:
    """Lists every file on one drive, one line per file under a count header.

    The listing runs on the worker pool and is restarted whenever the drive
    list changes; if the drive disappears the screen pops itself.
    """

    def __init__(self, ctx: ScreenContext, drive: DriveInfo) -> None:
        self._ctx = ctx
        self._drive = drive
        self._publisher = RenderPublisher(
            ViewState.of([ctx.messages.get(Msg.READING, drive.port)]),
            ctx.navigator.request_repaint,
        )
        self._binding: TaskBinding[tuple[str, ...]] = TaskBinding(
            ctx.executor,
            on_success=self._show_lines,
            on_failure=self._show_error,
            name=f"listing {drive.port}",
        )
        self._buttons = ButtonStateMachine(
            self._publisher,
            page_size=ctx.page_size,
            step=ctx.pan_step,
            is_loading=lambda: self._binding.is_busy,
            on_back=self._go_back,
            request_repaint=ctx.navigator.request_repaint,
        )

    @property
    def drive(self) -> DriveInfo:
        return self._drive

    @property
    def binding(self) -> TaskBinding[tuple[str, ...]]:
        return self._binding

    @property
    def mode(self) -> InputMode:
        return self._buttons.mode

    def view_state(self) -> ViewState:
        return self._publisher.current()

    def button_down(self, button: Button) -> None:
        self._buttons.handle(button)

    def drives_changed(self, drives: list[DriveInfo]) -> None:
        found = find_drive(drives, self._drive.device)
        if found is None:
            logger.info("Drive %s (%s) removed, leaving listing", self._drive.port, self._drive.device)
            self._go_back()
            return
        self._drive = found
        self._binding.submit(lambda token: self._list(found, token))

    def close(self) -> None:
        self._binding.shutdown()

    def _go_back(self) -> None:
        self._binding.cancel()
        self._ctx.navigator.pop_to_parent(self)

    def _list(self, drive: DriveInfo, token: CancelToken) -> Result[tuple[str, ...], ListingFailure]:
        try:
            result = self._ctx.lister.list_files(drive, cancel_check=token)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Lister raised for %s", drive.port)
            return Err(ListingFailure(drive, exc))
        if isinstance(result, Err):
            if result.unwrap_err().code is ListingErrorCode.CANCELLED:
                logger.debug("Listing of %s cancelled", drive.port)
            return Err(ListingFailure(drive, result.unwrap_err()))
        files = result.unwrap()
        header = self._ctx.messages.get(Msg.NUM_FILES, drive.port, len(files))
        return Ok((header, *(str(f) for f in files)))

    def _show_lines(self, lines: tuple[str, ...]) -> None:
        self._publisher.publish(ViewState(lines=lines))

    def _show_error(self, failure: ListingFailure) -> None:
        port = failure.drive.port
        error = failure.error
        if isinstance(error, ListingError):
            logger.warning("Cannot list %s: %s (%s)", port, error.message, error.code.value)
        else:
            logger.warning("Cannot list %s: %s", port, error)
        self._publisher.publish(ViewState.of([self._ctx.messages.get(Msg.CANT_READ_PORT, port)]))
