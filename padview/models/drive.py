from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from result import Result

from padview.services.formatting import format_bytes

CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class DriveInfo:
    device: str
    port: str
    mount_point: str | None = None
    label: str = ""

    @property
    def is_mounted(self) -> bool:
        return self.mount_point is not None

    def same_drive(self, other: DriveInfo) -> bool:
        # Mount point is not part of the identity; an unmounted drive is still the same drive.
        return self.device == other.device


def find_drive(drives: list[DriveInfo], device: str) -> DriveInfo | None:
    for drive in drives:
        if drive.device == device:
            return drive
    return None


@dataclass(slots=True, frozen=True)
class FileInfo:
    path: str
    size_bytes: int

    def __str__(self) -> str:
        return f"{self.path} {format_bytes(self.size_bytes)}"


class ListingErrorCode(str, Enum):
    NOT_MOUNTED = "not_mounted"
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    ROOT_STAT_FAILED = "root_stat_failed"
    CANCELLED = "cancelled"
    INTERNAL = "internal"


@dataclass(slots=True, frozen=True)
class ListingError:
    code: ListingErrorCode
    path: str
    message: str


ListingResult = Result[list[FileInfo], ListingError]
