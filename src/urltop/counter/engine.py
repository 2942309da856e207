from __future__ import annotations

from collections import Counter

from urltop.counter.aggregator import Aggregator
from urltop.counter.errors import InvalidTopCountError
from urltop.counter.extractor import iter_url_parts
from urltop.counter.pattern import MatchPattern, PatternLike
from urltop.counter.ranker import top_entries
from urltop.counter.report import Report
from urltop.logging import logger
from urltop.settings import DEFAULT_TOP_N, DEFAULT_URL_PATTERN


def _validate_top_n(top_n: int) -> int:
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
        raise InvalidTopCountError(f"top count must be a positive integer, got {top_n!r}")
    return top_n


class DomainPathCounter:
    """
    Counts domains and paths of the URLs found in a log held in memory.

    Configure through the constructor or `prepare()`, then call
    `compute_report()`. Every compute starts from empty tables, so repeated
    calls on the same configuration give the same report. One instance serves
    one caller at a time.
    """

    def __init__(
        self,
        text: str = "",
        pattern: PatternLike = DEFAULT_URL_PATTERN,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        self._agg = Aggregator()
        self.prepare(text, pattern, top_n)

    def prepare(self, text: str, pattern: PatternLike, top_n: int) -> None:
        # a rejected call leaves the previous configuration in place
        compiled = MatchPattern.compile(pattern)
        top_n = _validate_top_n(top_n)

        self._text = text or ""
        self._pattern = compiled
        self._top_n = top_n
        self._agg.reset()

    @property
    def pattern(self) -> MatchPattern:
        return self._pattern

    @property
    def top_n(self) -> int:
        return self._top_n

    @property
    def domains(self) -> Counter[str]:
        return self._agg.domains

    @property
    def paths(self) -> Counter[str]:
        return self._agg.paths

    @property
    def total_urls(self) -> int:
        return self._agg.total

    def compute(self) -> Report:
        self._agg.reset()
        self._agg.consume(iter_url_parts(self._text, self._pattern))

        report = Report(
            total_urls=self._agg.total,
            distinct_domains=len(self._agg.domains),
            distinct_paths=len(self._agg.paths),
            top_domains=tuple(top_entries(self._agg.domains, self._top_n)),
            top_paths=tuple(top_entries(self._agg.paths, self._top_n)),
        )
        logger.debug(
            "[engine] urls={} domains={} paths={} top_n={}",
            report.total_urls,
            report.distinct_domains,
            report.distinct_paths,
            self._top_n,
        )
        return report

    def compute_report(self) -> str:
        return self.compute().render()


__all__ = ["DomainPathCounter"]
