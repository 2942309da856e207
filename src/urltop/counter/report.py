from __future__ import annotations

from dataclasses import dataclass

from urltop.counter.ranker import RankedEntry
from urltop.enums import ReportSection


@dataclass(frozen=True)
class Report:
    total_urls: int
    distinct_domains: int
    distinct_paths: int
    top_domains: tuple[RankedEntry, ...]
    top_paths: tuple[RankedEntry, ...]

    def summary_line(self) -> str:
        return (
            f"total urls {self.total_urls}, "
            f"domains {self.distinct_domains}, "
            f"paths {self.distinct_paths}"
        )

    def render(self) -> str:
        lines: list[str] = [self.summary_line()]

        for section, entries in (
            (ReportSection.DOMAINS, self.top_domains),
            (ReportSection.PATHS, self.top_paths),
        ):
            lines.append("")
            lines.append(section.header)
            lines.extend(e.render() for e in entries)

        return "\n".join(lines) + "\n"


__all__ = ["Report"]
