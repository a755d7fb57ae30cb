"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_DOUBLE_CLICK_MS = 500.0
DEFAULT_MOVEMENT_THRESHOLD = 0.0


@dataclass(frozen=True, slots=True)
class ChordbindConfig:
    """Immutable parser and input-tracking configuration."""

    parse_trace_enabled: bool = False
    input_trace_enabled: bool = False
    double_click_ms: float = DEFAULT_DOUBLE_CLICK_MS
    movement_threshold: float = DEFAULT_MOVEMENT_THRESHOLD
    log_level: str = "INFO"


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def resolve_log_level_name(
    default: str = "INFO",
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("CHORDBIND_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_config(env: Mapping[str, str] | None = None) -> ChordbindConfig:
    """Load configuration from ``env`` (defaults to the process environment)."""
    return ChordbindConfig(
        parse_trace_enabled=_flag("CHORDBIND_PARSE_TRACE", False, env=env),
        input_trace_enabled=_flag("CHORDBIND_INPUT_TRACE", False, env=env),
        double_click_ms=_float(
            "CHORDBIND_DOUBLE_CLICK_MS", DEFAULT_DOUBLE_CLICK_MS, minimum=0.0, env=env
        ),
        movement_threshold=_float(
            "CHORDBIND_MOVEMENT_THRESHOLD", DEFAULT_MOVEMENT_THRESHOLD, minimum=0.0, env=env
        ),
        log_level=resolve_log_level_name(env=env),
    )


__all__ = ["ChordbindConfig", "load_config", "resolve_log_level_name"]
