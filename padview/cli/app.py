from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer
from result import Err
from rich.console import Console
from textual.logging import TextualHandler

from padview.config.defaults import default_config
from padview.config.loader import load_config, sample_config_json
from padview.config.schema import AppConfig
from padview.core.navigation import NavigationHost
from padview.core.screen import ScreenContext
from padview.i18n.messages import Messages
from padview.models.drive import DriveInfo
from padview.screens.choose_lang import ChooseLangScreen
from padview.services.drive_monitor import DriveFeed, DriveMonitor, StaticDriveFeed
from padview.services.lister import FileLister
from padview.ui.app import PadApp
from padview.ui.render import DisplayGeometry

console = Console()
logger = logging.getLogger("padview")

LOG_FORMAT = "[%(asctime)s] [%(levelname)-7s] %(name)s: %(message)s"


def _configure_logging(level: str, log_file: str | None) -> None:
    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    logging.basicConfig(level=level.upper(), handlers=handlers, force=True)


def parse_drive(spec: str) -> DriveInfo:
    """Turn ``PATH`` or ``PATH:PORT`` into a drive whose mount point is that directory."""
    path_part, sep, port = spec.rpartition(":")
    if not sep or not path_part:
        path_part, port = spec, ""
    path = Path(path_part).expanduser().absolute()
    return DriveInfo(
        device=f"dir:{path}",
        port=port or path.name or str(path),
        mount_point=str(path),
        label="dir",
    )


def build_host(config: AppConfig, executor: ThreadPoolExecutor) -> NavigationHost:
    host = NavigationHost()
    ctx = ScreenContext(
        navigator=host,
        executor=executor,
        lister=FileLister(workers=config.list_workers),
        messages=Messages(config.language),
        page_size=config.page_size,
        pan_step=config.pan_step,
    )
    host.push_screen(ChooseLangScreen(ctx))
    return host


def run(
    drive: Annotated[
        list[str] | None,
        typer.Option("--drive", "-d", help="Show a directory as a drive (PATH or PATH:PORT). Repeatable."),
    ] = None,
    config_path: Annotated[str | None, typer.Option("--config", help="Path to config JSON.")] = None,
    language: Annotated[str | None, typer.Option("--language", "-l", help="Display language (en, ko).")] = None,
    workers: Annotated[int | None, typer.Option("--workers", "-w", help="Threads per file listing.")] = None,
    poll_interval: Annotated[
        float | None, typer.Option("--poll-interval", help="Seconds between drive checks.")
    ] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="Logging level.")] = None,
    log_file: Annotated[str | None, typer.Option("--log-file", help="Also write logs to this file.")] = None,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
) -> None:
    if sys.platform == "win32":
        console.print("[red]Windows support is not implemented yet.[/]")
        raise typer.Exit(1)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    config_result = load_config(config_path)
    if isinstance(config_result, Err):
        console.print(f"[yellow]{config_result.unwrap_err()} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if language is not None:
        overrides["language"] = language
    if workers is not None:
        overrides["list_workers"] = max(1, workers)
    if poll_interval is not None:
        overrides["poll_interval"] = max(0.1, poll_interval)
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        config = replace(config, **overrides)

    _configure_logging(config.log_level, log_file)

    feed: DriveFeed
    if drive:
        feed = StaticDriveFeed([parse_drive(spec) for spec in drive])
    else:
        feed = DriveMonitor(config.mount_roots, poll_interval=config.poll_interval)

    geometry = DisplayGeometry(columns=config.columns, rows=config.page_size, char_width=config.char_width)
    executor = ThreadPoolExecutor(max_workers=config.pool_workers, thread_name_prefix="padview-task")
    try:
        host = build_host(config, executor)
        logger.info(
            "Starting with %dx%d display, %d lines per page",
            config.display_width,
            config.display_height,
            config.page_size,
        )
        PadApp(host, feed, geometry).run()
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
