from __future__ import annotations

import json
from typing import Any

from result import Err, Ok, Result

from padview.config.defaults import default_config
from padview.config.schema import AppConfig, from_dict
from padview.i18n.messages import available_languages
from padview.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/padview/config.json"


def _check_payload(payload: dict[str, Any]) -> str | None:
    """Return a problem description, or ``None`` when the fields can be used."""
    if "mountRoots" in payload:
        roots = payload["mountRoots"]
        if not isinstance(roots, list) or not all(isinstance(root, str) for root in roots):
            return "mountRoots must be a list of paths"
        relative = [root for root in roots if not root.startswith("/")]
        if relative:
            return f"mountRoots entries must be absolute paths, got {relative[0]!r}"
    if "language" in payload and payload["language"] not in available_languages():
        return f"language must be one of {', '.join(available_languages())}"
    return None


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    resolved = path or fs.expanduser(CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    try:
        payload = json.loads(fs.read_text(resolved))
        if not isinstance(payload, dict):
            return Err(f"Config at {resolved} must be a JSON object.")
        problem = _check_payload(payload)
        if problem is not None:
            return Err(f"Invalid config at {resolved}: {problem}.")
        return Ok(from_dict(payload, default_config()))
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
