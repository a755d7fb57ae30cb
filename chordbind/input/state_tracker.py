"""Per-frame active input tracking for chord evaluation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from chordbind.api.atoms import (
    InputAtom,
    KeyboardInput,
    MouseClickInput,
    MouseDragInput,
    is_input_atom,
)
from chordbind.api.bindings import ActionBindings
from chordbind.api.input_events import (
    KEY_EVENT_TYPES,
    POINTER_EVENT_TYPES,
    KeyEvent,
    PointerEvent,
    WheelEvent,
)
from chordbind.api.input_snapshot import ActionSnapshot, ChordSnapshot
from chordbind.input.directions import movement_from_delta, wheel_from_delta
from chordbind.input.key_names import click_atom_for_button, key_atom_for_name
from chordbind.runtime.config import ChordbindConfig, load_config

logger = logging.getLogger(__name__)

RawInputEvent = PointerEvent | KeyEvent | WheelEvent


class InputStateTracker:
    """Fold raw input events into the atom set a chord is evaluated against.

    Held keys and buttons stay active until released. Atoms pressed during a
    frame count as active for that frame even if released before the
    snapshot is taken. Movement, wheel, drag and double-click atoms only
    last for the frame in which they were observed.
    """

    def __init__(
        self,
        *,
        bindings: ActionBindings[Any] | None = None,
        config: ChordbindConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._bindings = bindings
        self._clock = clock
        self._held: set[InputAtom] = set()
        self._frame_pressed: set[InputAtom] = set()
        self._frame_released: set[InputAtom] = set()
        self._motion_dx = 0.0
        self._motion_dy = 0.0
        self._wheel_dx = 0.0
        self._wheel_dy = 0.0
        self._dragged = False
        self._double_clicked = False
        self._last_left_press: float | None = None
        self._pointer: tuple[float, float] | None = None
        self._active_actions: frozenset[Hashable] = frozenset()

    @property
    def held(self) -> frozenset[InputAtom]:
        return frozenset(self._held)

    def set_bindings(self, bindings: ActionBindings[Any] | None) -> None:
        """Attach the binding table used to derive action state."""
        self._bindings = bindings

    def bind(self, canvas: Any) -> None:
        """Attach listeners to a rendercanvas-style canvas."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        canvas.add_event_handler(self._on_canvas_pointer, "pointer_down")
        canvas.add_event_handler(self._on_canvas_pointer, "pointer_move")
        canvas.add_event_handler(self._on_canvas_pointer, "pointer_up")
        canvas.add_event_handler(self._on_canvas_key, "key_down")
        canvas.add_event_handler(self._on_canvas_key, "key_up")
        canvas.add_event_handler(self._on_canvas_wheel, "wheel")

    def press(self, member: InputAtom) -> None:
        """Mark a key or button as held."""
        if not is_input_atom(member):
            raise TypeError(f"expected an input atom, got {member!r}")
        if member not in self._held:
            if member is MouseClickInput.LEFT_CLICK:
                self._register_left_press()
            self._held.add(member)
            self._frame_pressed.add(member)
            if self._config.input_trace_enabled:
                logger.debug("input_pressed atom=%s", member.value)

    def release(self, member: InputAtom) -> None:
        """Mark a key or button as no longer held."""
        if not is_input_atom(member):
            raise TypeError(f"expected an input atom, got {member!r}")
        if member in self._held:
            self._held.discard(member)
            self._frame_released.add(member)
            if self._config.input_trace_enabled:
                logger.debug("input_released atom=%s", member.value)

    def release_all(self) -> None:
        """Release everything, e.g. when the window loses focus."""
        for member in tuple(self._held):
            self.release(member)

    def add_pointer_motion(self, dx: float, dy: float) -> None:
        """Accumulate a relative pointer delta for this frame."""
        self._motion_dx += float(dx)
        self._motion_dy += float(dy)
        threshold = self._config.movement_threshold
        exceeded = abs(dx) > threshold or abs(dy) > threshold
        if exceeded and MouseClickInput.LEFT_CLICK in self._held:
            self._dragged = True

    def move_pointer_to(self, x: float, y: float) -> None:
        """Record an absolute pointer position; the first one sets the origin."""
        previous = self._pointer
        self._pointer = (float(x), float(y))
        if previous is not None:
            self.add_pointer_motion(float(x) - previous[0], float(y) - previous[1])

    def add_wheel(self, dx: float, dy: float) -> None:
        """Accumulate a wheel delta for this frame."""
        self._wheel_dx += float(dx)
        self._wheel_dy += float(dy)

    def consume_window_input_events(self, events: Iterable[RawInputEvent]) -> None:
        """Ingest normalized raw events produced by a window layer."""
        for raw in events:
            if isinstance(raw, PointerEvent):
                self._apply_pointer_event(raw)
            elif isinstance(raw, KeyEvent):
                self._apply_key_event(raw)
            elif isinstance(raw, WheelEvent):
                self.add_wheel(raw.dx, raw.dy)
            else:
                raise TypeError(f"unsupported input event: {raw!r}")

    def active_inputs(self) -> frozenset[InputAtom]:
        """Return atoms active for the frame in progress."""
        active: set[InputAtom] = set(self._held) | self._frame_pressed
        threshold = self._config.movement_threshold
        for member in movement_from_delta(self._motion_dx, self._motion_dy, threshold=threshold):
            if member is not None:
                active.add(member)
        for member in wheel_from_delta(self._wheel_dx, self._wheel_dy):
            if member is not None:
                active.add(member)
        if self._dragged:
            active.add(MouseDragInput.MOUSE_DRAG)
        if self._double_clicked:
            active.add(MouseClickInput.DOUBLE_CLICK)
        return frozenset(active)

    def build_snapshot(self, *, frame_index: int) -> ChordSnapshot:
        """Build one immutable frame snapshot and reset per-frame state."""
        active = self.active_inputs()
        actions = ActionSnapshot()
        if self._bindings is not None:
            now_active: frozenset[Hashable] = self._bindings.active_actions(active)
            actions = ActionSnapshot(
                active=now_active,
                just_started=now_active - self._active_actions,
                just_ended=self._active_actions - now_active,
            )
            self._active_actions = now_active
        snapshot = ChordSnapshot(
            frame_index=frame_index,
            active_inputs=active,
            just_pressed=frozenset(self._frame_pressed),
            just_released=frozenset(self._frame_released),
            actions=actions,
        )
        self._reset_frame()
        return snapshot

    def _reset_frame(self) -> None:
        self._frame_pressed.clear()
        self._frame_released.clear()
        self._motion_dx = 0.0
        self._motion_dy = 0.0
        self._wheel_dx = 0.0
        self._wheel_dy = 0.0
        self._dragged = False
        self._double_clicked = False

    def _register_left_press(self) -> None:
        now = self._clock()
        previous = self._last_left_press
        interval = self._config.double_click_ms / 1000.0
        if previous is not None and now - previous <= interval:
            self._double_clicked = True
            self._last_left_press = None
            return
        self._last_left_press = now

    def _apply_pointer_event(self, event: PointerEvent) -> None:
        if event.event_type == "pointer_move":
            self.move_pointer_to(event.x, event.y)
            return
        member = click_atom_for_button(event.button)
        if member is None:
            if self._config.input_trace_enabled:
                logger.debug("input_pointer_ignored button=%d", event.button)
            return
        self.move_pointer_to(event.x, event.y)
        if event.event_type == "pointer_down":
            self.press(member)
        elif event.event_type == "pointer_up":
            self.release(member)

    def _apply_key_event(self, event: KeyEvent) -> None:
        member: KeyboardInput | None = key_atom_for_name(event.key)
        if member is None:
            if self._config.input_trace_enabled:
                logger.debug("input_key_unmapped key=%r", event.key)
            return
        if event.pressed:
            self.press(member)
        else:
            self.release(member)

    def _on_canvas_pointer(self, event: dict[str, Any]) -> None:
        event_type = event.get("event_type")
        x = event.get("x")
        y = event.get("y")
        if event_type not in POINTER_EVENT_TYPES:
            return
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            return
        button = event.get("button")
        if not isinstance(button, int):
            button = 0
        self._apply_pointer_event(PointerEvent(str(event_type), float(x), float(y), button))

    def _on_canvas_key(self, event: dict[str, Any]) -> None:
        event_type = event.get("event_type")
        key = event.get("key")
        if event_type not in KEY_EVENT_TYPES or not isinstance(key, str):
            return
        self._apply_key_event(KeyEvent(str(event_type), key))

    def _on_canvas_wheel(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "wheel":
            return
        dx = event.get("dx", 0.0)
        dy = event.get("dy", 0.0)
        if not isinstance(dx, (int, float)) or not isinstance(dy, (int, float)):
            return
        self.add_wheel(float(dx), float(dy))


__all__ = ["InputStateTracker", "RawInputEvent"]
