from __future__ import annotations

import logging
import threading
from pathlib import PurePosixPath
from typing import Callable, Protocol

import psutil

from padview.models.drive import DriveInfo

logger = logging.getLogger(__name__)

DrivesListener = Callable[[list[DriveInfo]], None]


class DriveFeed(Protocol):
    def start(self, listener: DrivesListener) -> None: ...

    def stop(self) -> None: ...


def _is_under(mount_point: str, roots: list[str]) -> bool:
    path = PurePosixPath(mount_point)
    for root in roots:
        root_path = PurePosixPath(root)
        if path != root_path and root_path in path.parents:
            return True
    return False


def scan_drives(mount_roots: list[str]) -> list[DriveInfo]:
    """Return the mounted partitions living under one of *mount_roots*, ordered by device."""
    drives: list[DriveInfo] = []
    for part in psutil.disk_partitions(all=False):
        if not _is_under(part.mountpoint, mount_roots):
            continue
        drives.append(
            DriveInfo(
                device=part.device,
                port=PurePosixPath(part.mountpoint).name,
                mount_point=part.mountpoint,
                label=part.fstype,
            )
        )
    drives.sort(key=lambda d: d.device)
    return drives


class DriveMonitor:
    """Polls the partition table and reports the full drive list whenever it changes."""

    def __init__(self, mount_roots: list[str], poll_interval: float = 1.0) -> None:
        self._mount_roots = list(mount_roots)
        self._poll_interval = poll_interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._last: list[DriveInfo] | None = None

    def poll_once(self, listener: DrivesListener) -> bool:
        try:
            drives = scan_drives(self._mount_roots)
        except (OSError, psutil.Error) as exc:
            logger.warning("Drive scan failed: %s", exc)
            return False
        if drives == self._last:
            return False
        self._last = drives
        listener(drives)
        return True

    def start(self, listener: DrivesListener) -> None:
        if self._thread is not None:
            return

        def run() -> None:
            while not self._stop.is_set():
                self.poll_once(listener)
                self._stop.wait(self._poll_interval)

        self._thread = threading.Thread(target=run, name="drive-monitor", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self._poll_interval + 0.5)
            self._thread = None


class StaticDriveFeed:
    """Reports a fixed drive list once; used to point the viewer at a plain directory."""

    def __init__(self, drives: list[DriveInfo]) -> None:
        self._drives = list(drives)

    def start(self, listener: DrivesListener) -> None:
        listener(list(self._drives))

    def stop(self) -> None:
        pass
