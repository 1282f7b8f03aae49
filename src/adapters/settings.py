from __future__ import annotations

import os

from src.domain.models import TrimmerConfig, TrimMethod


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int = 0) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def parse_line_ids(raw: str | None) -> frozenset[str]:
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def parse_method(raw: str) -> TrimMethod:
    try:
        return TrimMethod(raw.strip())
    except ValueError:
        known = ", ".join(m.value for m in TrimMethod)
        raise RuntimeError(f"Unknown trim method {raw!r} (expected one of: {known})") from None


def trimmer_config_from_env() -> TrimmerConfig:
    """Trimmer defaults, tunable via env without changing code.

    Env vars:
      - TRIM_METHOD: one of the TrimMethod values (default SplitRoute)
      - TRIM_TARGET_LINES: comma-separated transit line ids
      - TRIM_REMOVE_EMPTY_LINES (default true)
      - TRIM_INCLUDE_FIRST_STOP_WITHIN_ZONE (default true)
      - TRIM_INCLUDE_FIRST_HUB_IN_ZONE (default false)
      - TRIM_ALLOWABLE_STOPS_WITHIN_ZONE (default 0)
    """

    defaults = TrimmerConfig()
    raw_method = (os.getenv("TRIM_METHOD") or "").strip()
    return TrimmerConfig(
        method=parse_method(raw_method) if raw_method else defaults.method,
        remove_empty_lines=_env_bool("TRIM_REMOVE_EMPTY_LINES", defaults.remove_empty_lines),
        include_first_stop_within_zone=_env_bool(
            "TRIM_INCLUDE_FIRST_STOP_WITHIN_ZONE",
            defaults.include_first_stop_within_zone,
        ),
        include_first_hub_in_zone=_env_bool(
            "TRIM_INCLUDE_FIRST_HUB_IN_ZONE", defaults.include_first_hub_in_zone
        ),
        allowable_stops_within_zone=_env_int(
            "TRIM_ALLOWABLE_STOPS_WITHIN_ZONE", defaults.allowable_stops_within_zone
        ),
        target_lines=parse_line_ids(os.getenv("TRIM_TARGET_LINES")),
    )
