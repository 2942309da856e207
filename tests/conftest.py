from __future__ import annotations

import pytest

URLTOP_ENV = ("URLTOP_TOP_N", "URLTOP_URL_PATTERN", "URLTOP_ENCODING")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch restores the variable even when a .env file sets it later
    for name in URLTOP_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
