from urltop.counter.aggregator import Aggregator, FrequencyTable
from urltop.counter.engine import DomainPathCounter
from urltop.counter.errors import BadPatternError, CounterConfigError, InvalidTopCountError
from urltop.counter.extractor import DEFAULT_PATH, UrlParts, iter_url_parts, normalize_path
from urltop.counter.pattern import MatchPattern
from urltop.counter.ranker import RankedEntry, top_entries
from urltop.counter.report import Report

__all__ = [
    "Aggregator",
    "BadPatternError",
    "CounterConfigError",
    "DEFAULT_PATH",
    "DomainPathCounter",
    "FrequencyTable",
    "InvalidTopCountError",
    "MatchPattern",
    "RankedEntry",
    "Report",
    "UrlParts",
    "iter_url_parts",
    "normalize_path",
    "top_entries",
]
