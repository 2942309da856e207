from __future__ import annotations

from pathlib import Path

import pytest

from urltop.settings import (
    DEFAULT_ENCODING,
    DEFAULT_TOP_N,
    DEFAULT_URL_PATTERN,
    Settings,
    read_env_file,
)


def test_load_defaults(tmp_path: Path) -> None:
    settings = Settings.load(tmp_path)

    assert settings.root == tmp_path
    assert settings.top_n == DEFAULT_TOP_N
    assert settings.url_pattern == DEFAULT_URL_PATTERN
    assert settings.encoding == DEFAULT_ENCODING


def test_load_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("URLTOP_TOP_N", " 5 ")
    monkeypatch.setenv("URLTOP_URL_PATTERN", r"(http://)([a-z]+)(/\S*|$)")
    monkeypatch.setenv("URLTOP_ENCODING", "latin-1")

    settings = Settings.load(tmp_path)

    assert settings.top_n == 5
    assert settings.url_pattern == r"(http://)([a-z]+)(/\S*|$)"
    assert settings.encoding == "latin-1"


@pytest.mark.parametrize("raw", ["abc", "0", "-4", ""])
def test_invalid_top_n_falls_back_to_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("URLTOP_TOP_N", raw)

    assert Settings.load(tmp_path).top_n == DEFAULT_TOP_N


def test_load_reads_dotenv_without_overriding_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nURLTOP_TOP_N='7'\nURLTOP_ENCODING=cp1251\nnot a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("URLTOP_ENCODING", "utf-16")

    settings = Settings.load(tmp_path)

    assert settings.top_n == 7
    assert settings.encoding == "utf-16"


def test_with_overrides_skips_none(tmp_path: Path) -> None:
    settings = Settings.load(tmp_path)

    same = settings.with_overrides(top_n=None, encoding=None)
    changed = settings.with_overrides(top_n=4, url_pattern=None)

    assert same is settings
    assert changed.top_n == 4
    assert changed.url_pattern == settings.url_pattern
    assert settings.top_n == DEFAULT_TOP_N


def test_read_env_file_keeps_first_value_and_skips_noise(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# comment\n\nLOG_LEVEL=debug\n=orphan\nLOG_LEVEL=error\nURLTOP_ENCODING = \"latin-1\"\n",
        encoding="utf-8",
    )

    assert read_env_file(tmp_path) == {"LOG_LEVEL": "debug", "URLTOP_ENCODING": "latin-1"}


def test_read_env_file_missing(tmp_path: Path) -> None:
    assert read_env_file(tmp_path) == {}
