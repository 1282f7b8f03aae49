from __future__ import annotations

import pytest

from src.adapters.settings import parse_line_ids, parse_method, trimmer_config_from_env
from src.domain.models import TrimmerConfig, TrimMethod

_ENV = (
    "TRIM_METHOD",
    "TRIM_TARGET_LINES",
    "TRIM_REMOVE_EMPTY_LINES",
    "TRIM_INCLUDE_FIRST_STOP_WITHIN_ZONE",
    "TRIM_INCLUDE_FIRST_HUB_IN_ZONE",
    "TRIM_ALLOWABLE_STOPS_WITHIN_ZONE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env() -> None:
    assert trimmer_config_from_env() == TrimmerConfig()


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TRIM_METHOD", "SkipStopsWithinZone")
    monkeypatch.setenv("TRIM_TARGET_LINES", " 161---17326_700, ,184---17340_700")
    monkeypatch.setenv("TRIM_REMOVE_EMPTY_LINES", "false")
    monkeypatch.setenv("TRIM_INCLUDE_FIRST_STOP_WITHIN_ZONE", "0")
    monkeypatch.setenv("TRIM_INCLUDE_FIRST_HUB_IN_ZONE", "yes")
    monkeypatch.setenv("TRIM_ALLOWABLE_STOPS_WITHIN_ZONE", "3")

    config = trimmer_config_from_env()

    assert config.method is TrimMethod.SKIP_STOPS_WITHIN_ZONE
    assert config.target_lines == frozenset({"161---17326_700", "184---17340_700"})
    assert config.remove_empty_lines is False
    assert config.include_first_stop_within_zone is False
    assert config.include_first_hub_in_zone is True
    assert config.allowable_stops_within_zone == 3


def test_non_integer_allowance_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("TRIM_ALLOWABLE_STOPS_WITHIN_ZONE", "many")

    with pytest.raises(RuntimeError, match="TRIM_ALLOWABLE_STOPS_WITHIN_ZONE"):
        trimmer_config_from_env()


def test_negative_allowance_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("TRIM_ALLOWABLE_STOPS_WITHIN_ZONE", "-1")

    with pytest.raises(ValueError):
        trimmer_config_from_env()


def test_unknown_method_lists_known_ones() -> None:
    with pytest.raises(RuntimeError, match="SplitRoute"):
        parse_method("Shred")


def test_parse_line_ids_handles_empty() -> None:
    assert parse_line_ids(None) == frozenset()
    assert parse_line_ids("") == frozenset()
