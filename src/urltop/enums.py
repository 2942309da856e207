from __future__ import annotations

from enum import Enum


class ReportSection(str, Enum):
    DOMAINS = "top domains"
    PATHS = "top paths"

    @property
    def header(self) -> str:
        return self.value
