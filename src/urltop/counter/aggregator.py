from __future__ import annotations

from collections import Counter
from typing import Iterable

from urltop.counter.extractor import UrlParts

FrequencyTable = Counter


class Aggregator:
    """Domain and path tallies for a single pass over one input."""

    def __init__(self) -> None:
        self.domains: FrequencyTable[str] = Counter()
        self.paths: FrequencyTable[str] = Counter()
        self.total = 0

    def add(self, parts: UrlParts) -> None:
        self.domains[parts.domain] += 1
        self.paths[parts.path] += 1
        self.total += 1

    def consume(self, pairs: Iterable[UrlParts]) -> int:
        added = 0
        for parts in pairs:
            self.add(parts)
            added += 1
        return added

    def reset(self) -> None:
        self.domains.clear()
        self.paths.clear()
        self.total = 0


__all__ = ["Aggregator", "FrequencyTable"]
