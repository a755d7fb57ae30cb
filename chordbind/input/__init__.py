"""Chordbind input capture modules."""

from chordbind.api.input_events import KeyEvent, PointerEvent, WheelEvent
from chordbind.input.state_tracker import InputStateTracker

__all__ = ["InputStateTracker", "KeyEvent", "PointerEvent", "WheelEvent"]
