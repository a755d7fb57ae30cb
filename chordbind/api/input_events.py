"""Host-neutral raw input events consumed by the state tracker."""

from __future__ import annotations

from dataclasses import dataclass

POINTER_EVENT_TYPES = frozenset({"pointer_down", "pointer_up", "pointer_move"})
KEY_EVENT_TYPES = frozenset({"key_down", "key_up"})


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer press, release or motion at an absolute window position.

    ``button`` is 1 left, 2 right, 3 middle and 0 for plain motion.
    """

    event_type: str
    x: float
    y: float
    button: int

    def __post_init__(self) -> None:
        if self.event_type not in POINTER_EVENT_TYPES:
            raise ValueError(f"unknown pointer event type: {self.event_type!r}")


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Key press or release carrying the host key name, e.g. ``"Shift"``."""

    event_type: str
    key: str

    def __post_init__(self) -> None:
        if self.event_type not in KEY_EVENT_TYPES:
            raise ValueError(f"unknown key event type: {self.event_type!r}")

    @property
    def pressed(self) -> bool:
        return self.event_type == "key_down"


@dataclass(frozen=True, slots=True)
class WheelEvent:
    # positive dy scrolls down, positive dx scrolls right
    dx: float
    dy: float


__all__ = ["KEY_EVENT_TYPES", "POINTER_EVENT_TYPES", "KeyEvent", "PointerEvent", "WheelEvent"]
