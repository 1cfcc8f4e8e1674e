from __future__ import annotations

import threading
from concurrent.futures import Executor, Future
from typing import Any, Callable

from result import Err, Ok

from padview.core.screen import Screen, ScreenContext
from padview.i18n.messages import Messages
from padview.models.drive import CancelCheck, DriveInfo, FileInfo, ListingError, ListingErrorCode, ListingResult


class InlineExecutor(Executor):
    """Runs each submitted callable immediately on the calling thread."""

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        future: Future[Any] = Future()
        future.set_running_or_notify_cancel()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:  # noqa: BLE001
            future.set_exception(exc)
        return future


class RecordingNavigator:
    def __init__(self) -> None:
        self.pushed: list[Screen] = []
        self.popped: list[Screen | None] = []
        self.repaints = 0

    def push_screen(self, screen: Screen) -> None:
        self.pushed.append(screen)

    def pop_to_parent(self, screen: Screen | None = None) -> bool:
        self.popped.append(screen)
        return True

    def request_repaint(self) -> None:
        self.repaints += 1


class FixedLister:
    def __init__(self, files: list[FileInfo] | None = None, error: ListingError | None = None) -> None:
        self.files = files or []
        self.error = error
        self.calls: list[DriveInfo] = []

    def list_files(self, drive: DriveInfo, cancel_check: CancelCheck | None = None) -> ListingResult:
        self.calls.append(drive)
        if self.error is not None:
            return Err(self.error)
        return Ok(list(self.files))


class GatedLister:
    """Blocks every listing until the test opens its gate; honours cancellation."""

    def __init__(self, files_by_call: list[list[FileInfo]]) -> None:
        self._files_by_call = files_by_call
        self._lock = threading.Lock()
        self.gates: list[threading.Event] = []
        self.started: list[threading.Event] = [threading.Event() for _ in files_by_call]

    def list_files(self, drive: DriveInfo, cancel_check: CancelCheck | None = None) -> ListingResult:
        with self._lock:
            index = len(self.gates)
            gate = threading.Event()
            self.gates.append(gate)
        self.started[index].set()
        while not gate.wait(0.01):
            if cancel_check is not None and cancel_check():
                return Err(ListingError(ListingErrorCode.CANCELLED, drive.mount_point or "", "Listing cancelled"))
        return Ok(list(self._files_by_call[index]))


def make_context(
    lister: Any,
    navigator: Any | None = None,
    executor: Executor | None = None,
    page_size: int = 4,
    pan_step: int = 32,
) -> ScreenContext:
    return ScreenContext(
        navigator=navigator if navigator is not None else RecordingNavigator(),
        executor=executor if executor is not None else InlineExecutor(),
        lister=lister,
        messages=Messages("en"),
        page_size=page_size,
        pan_step=pan_step,
    )


def sdcard(mount_point: str | None = "/media/pi/SDCARD1") -> DriveInfo:
    return DriveInfo(device="/dev/sda1", port="SDCARD1", mount_point=mount_point, label="vfat")
