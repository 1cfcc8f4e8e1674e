from __future__ import annotations

from padview.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig(
        language="en",
        display_width=128,
        display_height=64,
        char_width=8,
        line_height=16,
        pan_chars=4,
        list_workers=4,
        pool_workers=2,
        poll_interval=1.0,
        mount_roots=["/media", "/mnt", "/run/media"],
        log_level="INFO",
    )
