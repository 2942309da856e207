from __future__ import annotations

from typing import Iterator, NamedTuple

from urltop.counter.pattern import DOMAIN_GROUP, PATH_GROUP, MatchPattern

DEFAULT_PATH = "/"


class UrlParts(NamedTuple):
    domain: str
    path: str


def normalize_path(raw: str | None) -> str:
    """Empty or whitespace-only path, e.g. the space that ended the domain, counts as `/`."""
    if not raw or raw.isspace():
        return DEFAULT_PATH
    return raw


def iter_lines(text: str) -> Iterator[str]:
    # lines end at "\n" only; a "\r" before it belongs to the terminator
    for line in (text or "").split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def iter_url_parts(text: str, pattern: MatchPattern) -> Iterator[UrlParts]:
    """Yield (domain, path) for every match, line by line, left to right."""
    for line in iter_lines(text):
        for m in pattern.finditer(line):
            domain = m.group(DOMAIN_GROUP) or ""
            yield UrlParts(domain=domain, path=normalize_path(m.group(PATH_GROUP)))


__all__ = ["DEFAULT_PATH", "UrlParts", "iter_lines", "iter_url_parts", "normalize_path"]
