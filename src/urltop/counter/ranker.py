from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class RankedEntry:
    key: str
    count: int

    def render(self) -> str:
        return f"{self.count} {self.key}"


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    key, count = item
    return count, key


def top_entries(table: Mapping[str, int], n: int) -> list[RankedEntry]:
    """
    Return the `n` most frequent entries of `table`.

    Higher counts come first. Equal counts are ordered by key, greater key
    first, so `{"b": 5, "a": 5, "c": 3}` ranks as b, a, c. Python compares
    `str` by code point, which gives the same order as comparing UTF-8 bytes.
    The result never depends on the iteration order of `table`.
    """
    if n <= 0 or not table:
        return []
    best = heapq.nlargest(n, table.items(), key=_rank_key)
    return [RankedEntry(key=key, count=count) for key, count in best]


__all__ = ["RankedEntry", "top_entries"]
