"""Low-level JSON helpers for config files."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import ConfigLoadError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise ConfigLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise ConfigLoadError(f"Unable to read config file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(f"Config file is not valid UTF-8: {path}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Invalid JSON in {path}: {exc}") from exc
