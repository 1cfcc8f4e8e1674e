from __future__ import annotations

import json

import pytest
from result import Err, Ok

from padview.config.loader import load_config, sample_config_json
from tests.fs_mock import MemoryFileSystem


def test_load_config_missing_uses_defaults() -> None:
    fs = MemoryFileSystem()
    result = load_config(path="/missing.json", fs=fs)
    assert isinstance(result, Ok)
    cfg = result.unwrap()
    assert cfg.page_size == 4
    assert cfg.pan_step == 32
    assert cfg.columns == 16
    assert "/media" in cfg.mount_roots


def test_load_config_invalid_returns_warning() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="not-json")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    warning = result.unwrap_err()
    assert "failed reading config" in warning.lower()


def test_load_config_non_object_is_rejected() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="[1, 2]")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    assert "json object" in result.unwrap_err().lower()


def test_load_config_overrides_and_clamps() -> None:
    payload = {"language": "ko", "lineHeight": 8, "listWorkers": 0, "mountRoots": ["/srv/usb"], "logLevel": "debug"}
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))

    result = load_config(path="/config.json", fs=fs)

    assert isinstance(result, Ok)
    cfg = result.unwrap()
    assert cfg.language == "ko"
    assert cfg.page_size == 8
    assert cfg.list_workers == 1
    assert cfg.mount_roots == ["/srv/usb"]
    assert cfg.log_level == "DEBUG"
    assert cfg.display_width == 128


def test_sample_config_round_trips_through_loader() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content=sample_config_json())
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Ok)
    assert result.unwrap().to_dict() == json.loads(sample_config_json())


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ({"mountRoots": "/media"}, "list of paths"),
        ({"mountRoots": ["/media", 3]}, "list of paths"),
        ({"mountRoots": ["/media", "usb"]}, "absolute paths"),
        ({"language": "fr"}, "language must be one of en, ko"),
    ],
)
def test_load_config_rejects_unusable_fields(payload: dict[str, object], fragment: str) -> None:
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))

    result = load_config(path="/config.json", fs=fs)

    assert isinstance(result, Err)
    message = result.unwrap_err()
    assert message.startswith("Invalid config at /config.json")
    assert fragment in message
