from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from urltop.logging import logger

KNOWN_KEYS = ("top_n", "url_pattern", "encoding")


class ConfigFileError(ValueError):
    """Raised when a YAML config file is missing or malformed."""


def load_yaml_config(path: Path | str) -> dict[str, Any]:
    """
    Read run options from a YAML mapping.

    Only `top_n`, `url_pattern` and `encoding` are recognised; other keys are
    dropped with a warning. `top_n` must be a positive integer.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileError(f"config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigFileError(f"config file must contain a mapping: {path}")

    out: dict[str, Any] = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning("[config] ignoring unknown key {!r} in {}", key, path)
            continue
        out[key] = value

    top_n = out.get("top_n")
    if top_n is not None and (isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0):
        raise ConfigFileError(f"top_n must be a positive integer, got {top_n!r}")

    for key in ("url_pattern", "encoding"):
        if key in out and not isinstance(out[key], str):
            raise ConfigFileError(f"{key} must be a string, got {out[key]!r}")

    return out


__all__ = ["ConfigFileError", "KNOWN_KEYS", "load_yaml_config"]
