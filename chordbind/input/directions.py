"""Direction atoms derived from pointer and wheel deltas.

Deltas use window orientation: negative ``dy`` is up, negative ``dx`` is left.
"""

from __future__ import annotations

from chordbind.api.atoms import MouseMovementInput, MouseWheelInput


def movement_from_delta(
    dx: float,
    dy: float,
    *,
    threshold: float = 0.0,
) -> tuple[MouseMovementInput | None, MouseMovementInput | None]:
    """Return ``(horizontal, vertical)`` movement atoms for one pointer delta."""
    horizontal: MouseMovementInput | None = None
    vertical: MouseMovementInput | None = None
    if dx < -threshold:
        horizontal = MouseMovementInput.MOUSE_LEFT
    elif dx > threshold:
        horizontal = MouseMovementInput.MOUSE_RIGHT
    if dy < -threshold:
        vertical = MouseMovementInput.MOUSE_UP
    elif dy > threshold:
        vertical = MouseMovementInput.MOUSE_DOWN
    return horizontal, vertical


def wheel_from_delta(
    dx: float,
    dy: float,
) -> tuple[MouseWheelInput | None, MouseWheelInput | None]:
    """Return ``(horizontal, vertical)`` wheel atoms for one scroll delta."""
    horizontal: MouseWheelInput | None = None
    vertical: MouseWheelInput | None = None
    if dx < 0:
        horizontal = MouseWheelInput.WHEEL_LEFT
    elif dx > 0:
        horizontal = MouseWheelInput.WHEEL_RIGHT
    if dy < 0:
        vertical = MouseWheelInput.WHEEL_UP
    elif dy > 0:
        vertical = MouseWheelInput.WHEEL_DOWN
    return horizontal, vertical


__all__ = ["movement_from_delta", "wheel_from_delta"]
