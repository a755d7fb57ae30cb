"""GLFW key/button code translation and callback adapter."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from chordbind.api.atoms import KeyboardInput, MouseClickInput
from chordbind.input.state_tracker import InputStateTracker

_LOG = logging.getLogger(__name__)

# GLFW constant name -> atom. Resolved against the loaded module at runtime.
_KEY_CONSTANTS: tuple[tuple[str, KeyboardInput], ...] = (
    ("KEY_LEFT_CONTROL", KeyboardInput.LCTRL),
    ("KEY_RIGHT_CONTROL", KeyboardInput.RCTRL),
    ("KEY_LEFT_SHIFT", KeyboardInput.LSHIFT),
    ("KEY_RIGHT_SHIFT", KeyboardInput.RSHIFT),
    ("KEY_LEFT_ALT", KeyboardInput.LALT),
    ("KEY_RIGHT_ALT", KeyboardInput.RALT),
    ("KEY_LEFT_SUPER", KeyboardInput.LWIN),
    ("KEY_RIGHT_SUPER", KeyboardInput.RWIN),
    ("KEY_TAB", KeyboardInput.TAB),
    ("KEY_CAPS_LOCK", KeyboardInput.CAPS),
    ("KEY_ESCAPE", KeyboardInput.ESC),
    ("KEY_PRINT_SCREEN", KeyboardInput.PRTSCR),
    ("KEY_SCROLL_LOCK", KeyboardInput.SCROLL_LOCK),
    ("KEY_NUM_LOCK", KeyboardInput.NUM_LOCK),
    ("KEY_PAUSE", KeyboardInput.PAUSE),
    ("KEY_INSERT", KeyboardInput.INSERT),
    ("KEY_HOME", KeyboardInput.HOME),
    ("KEY_DELETE", KeyboardInput.DELETE),
    ("KEY_END", KeyboardInput.END),
    ("KEY_PAGE_DOWN", KeyboardInput.PAGE_DOWN),
    ("KEY_PAGE_UP", KeyboardInput.PAGE_UP),
    ("KEY_UP", KeyboardInput.UP),
    ("KEY_LEFT", KeyboardInput.LEFT),
    ("KEY_DOWN", KeyboardInput.DOWN),
    ("KEY_RIGHT", KeyboardInput.RIGHT),
    ("KEY_BACKSPACE", KeyboardInput.BACKSPACE),
    ("KEY_ENTER", KeyboardInput.RETURN),
    ("KEY_SPACE", KeyboardInput.SPACE),
    ("KEY_GRAVE_ACCENT", KeyboardInput.GRAVE),
    ("KEY_MINUS", KeyboardInput.MINUS),
    ("KEY_EQUAL", KeyboardInput.EQUALS),
    ("KEY_BACKSLASH", KeyboardInput.BACKSLASH),
    ("KEY_SEMICOLON", KeyboardInput.SEMICOLON),
    ("KEY_APOSTROPHE", KeyboardInput.APOSTROPHE),
    ("KEY_COMMA", KeyboardInput.COMMA),
    ("KEY_PERIOD", KeyboardInput.PERIOD),
    ("KEY_SLASH", KeyboardInput.SLASH),
    *((f"KEY_{digit}", KeyboardInput[f"KEY{digit}"]) for digit in range(10)),
    *((f"KEY_KP_{digit}", KeyboardInput[f"NUMPAD{digit}"]) for digit in range(10)),
    *((f"KEY_{chr(code)}", KeyboardInput[chr(code)]) for code in range(ord("A"), ord("Z") + 1)),
    *((f"KEY_F{index}", KeyboardInput[f"F{index}"]) for index in range(1, 25)),
)

_BUTTON_CONSTANTS: tuple[tuple[str, MouseClickInput], ...] = (
    ("MOUSE_BUTTON_LEFT", MouseClickInput.LEFT_CLICK),
    ("MOUSE_BUTTON_RIGHT", MouseClickInput.RIGHT_CLICK),
    ("MOUSE_BUTTON_MIDDLE", MouseClickInput.MIDDLE_CLICK),
)


def load_glfw() -> Any:
    """Import the glfw binding or fail with an actionable message."""
    try:
        import glfw
    except ImportError as exc:
        raise RuntimeError(
            "GLFW backend unavailable. Install the 'glfw' package and a GLFW shared library."
        ) from exc
    return glfw


@lru_cache(maxsize=1)
def glfw_key_table() -> dict[int, KeyboardInput]:
    glfw = load_glfw()
    return {int(getattr(glfw, name)): member for name, member in _KEY_CONSTANTS}


@lru_cache(maxsize=1)
def glfw_button_table() -> dict[int, MouseClickInput]:
    glfw = load_glfw()
    return {int(getattr(glfw, name)): member for name, member in _BUTTON_CONSTANTS}


def keyboard_atom_for_glfw_key(key: int) -> KeyboardInput | None:
    return glfw_key_table().get(int(key))


def mouse_click_for_glfw_button(button: int) -> MouseClickInput | None:
    return glfw_button_table().get(int(button))


class GlfwInputAdapter:
    """Forward GLFW window callbacks into an input state tracker.

    GLFW reports positive vertical scroll for "up"; the tracker works in
    window orientation, so the vertical offset is negated on the way in.
    """

    def __init__(self, tracker: InputStateTracker, *, glfw_module: Any | None = None) -> None:
        self._tracker = tracker
        self._glfw = glfw_module if glfw_module is not None else load_glfw()

    def attach(self, window: Any) -> None:
        """Install key, button, cursor and scroll callbacks on ``window``."""
        glfw = self._glfw
        glfw.set_key_callback(window, self.on_key)
        glfw.set_mouse_button_callback(window, self.on_mouse_button)
        glfw.set_cursor_pos_callback(window, self.on_cursor_pos)
        glfw.set_scroll_callback(window, self.on_scroll)
        glfw.set_window_focus_callback(window, self.on_focus)

    def on_key(self, window: Any, key: int, scancode: int, action: int, mods: int) -> None:
        member = keyboard_atom_for_glfw_key(key)
        if member is None:
            _LOG.debug("glfw_key_unmapped key=%d scancode=%d", key, scancode)
            return
        if action == self._glfw.PRESS:
            self._tracker.press(member)
        elif action == self._glfw.RELEASE:
            self._tracker.release(member)

    def on_mouse_button(self, window: Any, button: int, action: int, mods: int) -> None:
        member = mouse_click_for_glfw_button(button)
        if member is None:
            _LOG.debug("glfw_button_unmapped button=%d", button)
            return
        if action == self._glfw.PRESS:
            self._tracker.press(member)
        elif action == self._glfw.RELEASE:
            self._tracker.release(member)

    def on_cursor_pos(self, window: Any, x: float, y: float) -> None:
        self._tracker.move_pointer_to(float(x), float(y))

    def on_scroll(self, window: Any, xoffset: float, yoffset: float) -> None:
        self._tracker.add_wheel(float(xoffset), -float(yoffset))

    def on_focus(self, window: Any, focused: int) -> None:
        if not focused:
            self._tracker.release_all()


__all__ = [
    "GlfwInputAdapter",
    "glfw_button_table",
    "glfw_key_table",
    "keyboard_atom_for_glfw_key",
    "load_glfw",
    "mouse_click_for_glfw_button",
]
