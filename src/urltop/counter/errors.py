from __future__ import annotations


class CounterConfigError(ValueError):
    """Base error for an engine configured with unusable input."""


class BadPatternError(CounterConfigError):
    """Raised when the match pattern does not compile or lacks the required groups."""


class InvalidTopCountError(CounterConfigError):
    """Raised when the requested top count is not a positive integer."""


__all__ = ["BadPatternError", "CounterConfigError", "InvalidTopCountError"]
