from __future__ import annotations

import os
from pathlib import Path

from urltop.settings import DEFAULT_ENCODING


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_log_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    # undecodable bytes become U+FFFD
    with path.open("r", encoding=encoding, errors="replace") as f:
        return f.read()


def write_text_atomic(path: Path, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    ensure_parent(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding=encoding, newline="\n") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


__all__ = ["ensure_parent", "read_log_text", "write_text_atomic"]
