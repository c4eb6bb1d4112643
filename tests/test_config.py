from __future__ import annotations

from pathlib import Path

import pytest

from leavecalc.calendar import DEFAULT_MAX_WALK_DAYS, RestDay
from leavecalc.config import Settings, load_settings

_VARS = ("LEAVECALC_REST_DAY", "LEAVECALC_MAX_WALK_DAYS", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def _empty_env_file(tmp_path: Path) -> str:
    path = tmp_path / ".env"
    path.write_text("", encoding="utf-8")
    return str(path)


def test_load_settings_defaults(tmp_path: Path) -> None:
    settings = load_settings(dotenv_path=_empty_env_file(tmp_path))
    assert settings == Settings()
    assert settings.rest_day is RestDay.SUNDAY
    assert settings.max_walk_days == DEFAULT_MAX_WALK_DAYS
    assert settings.log_level == "WARNING"


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LEAVECALC_REST_DAY", "saturday")
    monkeypatch.setenv("LEAVECALC_MAX_WALK_DAYS", "400")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings(dotenv_path=_empty_env_file(tmp_path))
    assert settings.rest_day is RestDay.SATURDAY
    assert settings.max_walk_days == 400
    assert settings.log_level == "DEBUG"


def test_load_settings_reads_dotenv_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "leave.env"
    path.write_text("LEAVECALC_REST_DAY=friday\nLEAVECALC_MAX_WALK_DAYS=90\n", encoding="utf-8")
    # load_dotenv writes into os.environ; let monkeypatch restore it.
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    settings = load_settings(dotenv_path=str(path))
    assert settings.rest_day is RestDay.FRIDAY
    assert settings.max_walk_days == 90


def test_environment_wins_over_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "leave.env"
    path.write_text("LEAVECALC_REST_DAY=friday\n", encoding="utf-8")
    monkeypatch.setenv("LEAVECALC_REST_DAY", "monday")

    assert load_settings(dotenv_path=str(path)).rest_day is RestDay.MONDAY


def test_load_settings_rejects_unknown_rest_day(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LEAVECALC_REST_DAY", "funday")
    with pytest.raises(RuntimeError, match=r"Invalid LEAVECALC_REST_DAY"):
        load_settings(dotenv_path=_empty_env_file(tmp_path))


@pytest.mark.parametrize("raw", ["abc", "1.5"])
def test_load_settings_rejects_non_integer_walk_limit(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, raw: str
) -> None:
    monkeypatch.setenv("LEAVECALC_MAX_WALK_DAYS", raw)
    with pytest.raises(RuntimeError, match=r"Invalid LEAVECALC_MAX_WALK_DAYS"):
        load_settings(dotenv_path=_empty_env_file(tmp_path))


def test_load_settings_rejects_non_positive_walk_limit(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LEAVECALC_MAX_WALK_DAYS", "0")
    with pytest.raises(RuntimeError, match=r">= 1"):
        load_settings(dotenv_path=_empty_env_file(tmp_path))


def test_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match=r"Invalid LOG_LEVEL"):
        load_settings(dotenv_path=_empty_env_file(tmp_path))
