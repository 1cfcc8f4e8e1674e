from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class AppConfig:
    language: str = "en"
    display_width: int = 128
    display_height: int = 64
    char_width: int = 8
    line_height: int = 16
    pan_chars: int = 4
    list_workers: int = 4
    pool_workers: int = 2
    poll_interval: float = 1.0
    mount_roots: list[str] = field(default_factory=list)
    log_level: str = "INFO"

    @property
    def page_size(self) -> int:
        return max(1, self.display_height // self.line_height)

    @property
    def columns(self) -> int:
        return max(1, self.display_width // self.char_width)

    @property
    def pan_step(self) -> int:
        return self.char_width * self.pan_chars

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "displayWidth": self.display_width,
            "displayHeight": self.display_height,
            "charWidth": self.char_width,
            "lineHeight": self.line_height,
            "panChars": self.pan_chars,
            "listWorkers": self.list_workers,
            "poolWorkers": self.pool_workers,
            "pollInterval": self.poll_interval,
            "mountRoots": self.mount_roots,
            "logLevel": self.log_level,
        }


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        language=str(data.get("language", defaults.language)),
        display_width=max(8, int(data.get("displayWidth", defaults.display_width))),
        display_height=max(8, int(data.get("displayHeight", defaults.display_height))),
        char_width=max(1, int(data.get("charWidth", defaults.char_width))),
        line_height=max(1, int(data.get("lineHeight", defaults.line_height))),
        pan_chars=max(1, int(data.get("panChars", defaults.pan_chars))),
        list_workers=max(1, int(data.get("listWorkers", defaults.list_workers))),
        pool_workers=max(1, int(data.get("poolWorkers", defaults.pool_workers))),
        poll_interval=max(0.1, float(data.get("pollInterval", defaults.poll_interval))),
        mount_roots=[str(x) for x in data["mountRoots"]] if "mountRoots" in data else list(defaults.mount_roots),
        log_level=str(data.get("logLevel", defaults.log_level)).upper(),
    )
