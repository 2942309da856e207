from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

DEFAULT_URL_PATTERN = r"(https?://)([-a-zA-Z0-9.]+)(\s|$|/[-a-zA-Z0-9.,/+_]*)"
DEFAULT_TOP_N = 1
DEFAULT_ENCODING = "utf-8"


def _getenv(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _getenv_int(name: str, default: int) -> int:
    try:
        return int(_getenv(name, str(default)).strip())
    except ValueError:
        return default


def _getenv_positive_int(name: str, default: int) -> int:
    v = _getenv_int(name, default)
    return v if v > 0 else default


def read_env_file(root: Path) -> dict[str, str]:
    """Key/value pairs of `root/.env`; comments, blank lines and lines without `=` are skipped."""
    env_path = root / ".env"
    if not env_path.exists():
        return {}

    try:
        lines = env_path.read_text(encoding="utf-8", errors="ignore").splitlines()
    except OSError:
        return {}

    out: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        k, v = line.split("=", 1)
        k = k.strip()
        if not k:
            continue
        out.setdefault(k, v.strip().strip("'\""))
    return out


def _parse_env_file(root: Path) -> None:
    for k, v in read_env_file(root).items():
        os.environ.setdefault(k, v)


@dataclass(frozen=True)
class Settings:
    root: Path

    # counting
    top_n: int
    url_pattern: str

    # io
    encoding: str

    @classmethod
    def load(cls, root: Path | None = None) -> "Settings":
        root = Path.cwd() if root is None else Path(root)
        _parse_env_file(root)

        return cls(
            root=root,
            top_n=_getenv_positive_int("URLTOP_TOP_N", DEFAULT_TOP_N),
            url_pattern=_getenv("URLTOP_URL_PATTERN", "").strip() or DEFAULT_URL_PATTERN,
            encoding=_getenv("URLTOP_ENCODING", "").strip() or DEFAULT_ENCODING,
        )

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Copy of the settings with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


__all__ = ["DEFAULT_ENCODING", "DEFAULT_TOP_N", "DEFAULT_URL_PATTERN", "Settings", "read_env_file"]
