from __future__ import annotations

import logging
import queue
import threading

from result import Err, Ok

from padview.models.drive import (
    CancelCheck,
    DriveInfo,
    FileInfo,
    ListingError,
    ListingErrorCode,
    ListingResult,
)
from padview.services.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)


def resolve_mount(drive: DriveInfo, fs: FileSystem) -> str | ListingError:
    """Validate the drive's mount point.

    Returns the mount point, or a ``ListingError`` on failure.
    """
    if drive.mount_point is None:
        return ListingError(
            code=ListingErrorCode.NOT_MOUNTED,
            path=drive.device,
            message="Drive is not mounted",
        )
    root = drive.mount_point
    if not fs.exists(root):
        return ListingError(
            code=ListingErrorCode.NOT_FOUND,
            path=root,
            message="Mount point does not exist",
        )
    try:
        root_stat = fs.stat(root)
    except OSError as exc:
        return ListingError(
            code=ListingErrorCode.ROOT_STAT_FAILED,
            path=root,
            message=f"Cannot stat mount point: {exc}",
        )
    if not root_stat.is_dir:
        return ListingError(
            code=ListingErrorCode.NOT_DIRECTORY,
            path=root,
            message="Mount point is not a directory",
        )
    return root


class FileLister:
    """Recursively enumerates the files on a drive with a small pool of threads.

    The walk checks *cancel_check* between directory entries, so a cancelled
    listing stops after the entry currently being visited.
    """

    def __init__(self, workers: int = 4, fs: FileSystem = DEFAULT_FS) -> None:
        self._workers = max(1, workers)
        self._fs = fs

    def list_files(self, drive: DriveInfo, cancel_check: CancelCheck | None = None) -> ListingResult:
        resolved = resolve_mount(drive, self._fs)
        if isinstance(resolved, ListingError):
            return Err(resolved)
        root = resolved.rstrip("/") or "/"
        prefix_len = len(root.rstrip("/")) + 1

        q: queue.Queue[str | None] = queue.Queue()
        q.put(root)

        files: list[FileInfo] = []
        files_lock = threading.Lock()
        cancelled = threading.Event()
        failures: list[str] = []

        def _is_cancelled() -> bool:
            if cancelled.is_set():
                return True
            if cancel_check is not None and cancel_check():
                cancelled.set()
                return True
            return False

        def run_worker() -> None:
            while True:
                path = q.get()
                if path is None:
                    q.task_done()
                    break

                if _is_cancelled():
                    q.task_done()
                    continue

                local: list[FileInfo] = []
                try:
                    for entry in self._fs.scandir(path):
                        if _is_cancelled():
                            break
                        st = entry.stat
                        if st is None:
                            continue
                        if st.is_dir:
                            q.put(entry.path)
                        else:
                            local.append(FileInfo(path=entry.path[prefix_len:], size_bytes=st.size))
                except Exception as exc:  # noqa: BLE001
                    if path == root:
                        failures.append(str(exc))
                    else:
                        logger.debug("Skipping unreadable directory %s: %s", path, exc)
                finally:
                    if local:
                        with files_lock:
                            files.extend(local)
                    q.task_done()

        threads = [threading.Thread(target=run_worker, daemon=True) for _ in range(self._workers)]
        for thread in threads:
            thread.start()
        q.join()
        for _ in threads:
            q.put(None)
        q.join()
        for thread in threads:
            thread.join(timeout=0.3)

        if cancelled.is_set():
            return Err(
                ListingError(
                    code=ListingErrorCode.CANCELLED,
                    path=root,
                    message="Listing cancelled",
                )
            )
        if failures:
            return Err(
                ListingError(
                    code=ListingErrorCode.INTERNAL,
                    path=root,
                    message=f"Cannot read mount point: {failures[0]}",
                )
            )

        files.sort(key=lambda f: f.path)
        return Ok(files)
