from __future__ import annotations

from chordbind.runtime.config import load_config, resolve_log_level_name


def test_load_config_defaults(monkeypatch) -> None:
    for name in (
        "CHORDBIND_PARSE_TRACE",
        "CHORDBIND_INPUT_TRACE",
        "CHORDBIND_DOUBLE_CLICK_MS",
        "CHORDBIND_MOVEMENT_THRESHOLD",
        "CHORDBIND_LOG_LEVEL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg = load_config()
    assert cfg.parse_trace_enabled is False
    assert cfg.input_trace_enabled is False
    assert cfg.double_click_ms == 500.0
    assert cfg.movement_threshold == 0.0
    assert cfg.log_level == "INFO"


def test_load_config_parses_environment(monkeypatch) -> None:
    monkeypatch.setenv("CHORDBIND_PARSE_TRACE", "yes")
    monkeypatch.setenv("CHORDBIND_INPUT_TRACE", "on")
    monkeypatch.setenv("CHORDBIND_DOUBLE_CLICK_MS", "250")
    monkeypatch.setenv("CHORDBIND_MOVEMENT_THRESHOLD", "1.5")
    monkeypatch.setenv("CHORDBIND_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.parse_trace_enabled is True
    assert cfg.input_trace_enabled is True
    assert cfg.double_click_ms == 250.0
    assert cfg.movement_threshold == 1.5
    assert cfg.log_level == "DEBUG"


def test_load_config_accepts_explicit_mapping() -> None:
    cfg = load_config({"CHORDBIND_PARSE_TRACE": "true"})
    assert cfg.parse_trace_enabled is True
    assert cfg.input_trace_enabled is False


def test_invalid_and_negative_numbers_fall_back_or_clamp() -> None:
    cfg = load_config(
        {
            "CHORDBIND_DOUBLE_CLICK_MS": "soon",
            "CHORDBIND_MOVEMENT_THRESHOLD": "-4",
            "CHORDBIND_INPUT_TRACE": "maybe",
        }
    )
    assert cfg.double_click_ms == 500.0
    assert cfg.movement_threshold == 0.0
    assert cfg.input_trace_enabled is False


def test_resolve_log_level_prefers_package_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("CHORDBIND_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"


def test_resolve_log_level_falls_back_to_generic_then_default() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name("debug", env={}) == "DEBUG"
    assert resolve_log_level_name(env={"CHORDBIND_LOG_LEVEL": "  "}) == "INFO"
