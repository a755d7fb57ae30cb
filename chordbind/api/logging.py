"""Public logging configuration contract."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging for applications embedding the parser."""
    from chordbind.runtime.logging import configure_logging as _configure_logging

    _configure_logging(config)


__all__ = ["LoggingConfig", "configure_logging"]
