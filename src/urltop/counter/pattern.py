from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

from urltop.counter.errors import BadPatternError
from urltop.settings import DEFAULT_URL_PATTERN

SCHEME_GROUP = 1
DOMAIN_GROUP = 2
PATH_GROUP = 3


@dataclass(frozen=True)
class MatchPattern:
    """
    Compiled URL pattern.

    Group 1 is the scheme marker, group 2 the domain and group 3 the trailing
    path (or the whitespace / end of line that closed the domain).
    """

    regex: re.Pattern[str]

    @classmethod
    def compile(cls, raw: Union[str, re.Pattern[str], "MatchPattern"]) -> "MatchPattern":
        if isinstance(raw, MatchPattern):
            return raw

        if isinstance(raw, re.Pattern):
            regex = raw
        else:
            if not isinstance(raw, str):
                raise BadPatternError(f"bad pattern: expected a string, got {type(raw).__name__}")
            try:
                regex = re.compile(raw)
            except re.error as e:
                raise BadPatternError(f"bad pattern {raw!r}: {e}") from e

        if not isinstance(regex.pattern, str):
            raise BadPatternError("bad pattern: bytes patterns are not supported")
        if regex.groups < PATH_GROUP:
            raise BadPatternError(
                f"bad pattern {regex.pattern!r}: expected {PATH_GROUP} groups "
                f"(scheme, domain, path), got {regex.groups}"
            )
        return cls(regex=regex)

    @classmethod
    def default(cls) -> "MatchPattern":
        return cls.compile(DEFAULT_URL_PATTERN)

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def finditer(self, line: str) -> Iterator[re.Match[str]]:
        return self.regex.finditer(line)


PatternLike = Union[str, re.Pattern[str], MatchPattern]

__all__ = [
    "DOMAIN_GROUP",
    "MatchPattern",
    "PATH_GROUP",
    "PatternLike",
    "SCHEME_GROUP",
]
