"""Public atomic input identifiers grouped by input category."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


class InputCategory(Enum):
    """Disjoint families of atomic inputs."""

    KEYBOARD = "Keyboard"
    MOUSE_CLICK = "MouseClick"
    MOUSE_MOVEMENT = "MouseMovement"
    MOUSE_WHEEL = "MouseWheel"
    MOUSE_DRAG = "MouseDrag"


class _AtomEnum(Enum):
    """Base for atom enums; member value is the canonical name."""

    @property
    def category(self) -> InputCategory:
        return ATOM_CATEGORIES[type(self)]

    @property
    def canonical_name(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.canonical_name


class KeyboardInput(_AtomEnum):
    """Keyboard keys. ``CTRL``, ``SHIFT``, ``ALT`` and ``WIN`` are composites."""

    CTRL = "Ctrl"
    LCTRL = "LCtrl"
    RCTRL = "RCtrl"
    SHIFT = "Shift"
    LSHIFT = "LShift"
    RSHIFT = "RShift"
    ALT = "Alt"
    LALT = "LAlt"
    RALT = "RAlt"
    WIN = "Win"
    LWIN = "LWin"
    RWIN = "RWin"

    TAB = "Tab"
    CAPS = "Caps"

    KEY0 = "Key0"
    KEY1 = "Key1"
    KEY2 = "Key2"
    KEY3 = "Key3"
    KEY4 = "Key4"
    KEY5 = "Key5"
    KEY6 = "Key6"
    KEY7 = "Key7"
    KEY8 = "Key8"
    KEY9 = "Key9"

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    ESC = "Esc"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"

    PRTSCR = "PrtScr"
    SCROLL_LOCK = "ScrollLock"
    NUM_LOCK = "NumLock"

    PAUSE = "Pause"
    INSERT = "Insert"
    HOME = "Home"
    DELETE = "Delete"
    END = "End"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"

    UP = "Up"
    LEFT = "Left"
    DOWN = "Down"
    RIGHT = "Right"

    BACKSPACE = "Backspace"
    RETURN = "Return"
    SPACE = "Space"
    COMPOSE = "Compose"

    NUMPAD0 = "Numpad0"
    NUMPAD1 = "Numpad1"
    NUMPAD2 = "Numpad2"
    NUMPAD3 = "Numpad3"
    NUMPAD4 = "Numpad4"
    NUMPAD5 = "Numpad5"
    NUMPAD6 = "Numpad6"
    NUMPAD7 = "Numpad7"
    NUMPAD8 = "Numpad8"
    NUMPAD9 = "Numpad9"

    GRAVE = "Grave"
    MINUS = "Minus"
    EQUALS = "Equals"
    BACKSLASH = "Backslash"
    SEMICOLON = "Semicolon"
    APOSTROPHE = "Apostrophe"
    COMMA = "Comma"
    PERIOD = "Period"
    SLASH = "Slash"


class MouseClickInput(_AtomEnum):
    """Mouse button clicks. ``DOUBLE_CLICK`` is derived by the host, not a button."""

    LEFT_CLICK = "LeftClick"
    MIDDLE_CLICK = "MiddleClick"
    RIGHT_CLICK = "RightClick"
    DOUBLE_CLICK = "DoubleClick"


class MouseMovementInput(_AtomEnum):
    """Pointer movement directions. Vertical/horizontal are composites."""

    MOUSE_UP = "MouseUp"
    MOUSE_DOWN = "MouseDown"
    MOUSE_LEFT = "MouseLeft"
    MOUSE_RIGHT = "MouseRight"
    MOUSE_VERTICAL = "MouseVertical"
    MOUSE_HORIZONTAL = "MouseHorizontal"


class MouseWheelInput(_AtomEnum):
    """Wheel scroll directions. Vertical/horizontal are composites."""

    WHEEL_UP = "WheelUp"
    WHEEL_DOWN = "WheelDown"
    WHEEL_LEFT = "WheelLeft"
    WHEEL_RIGHT = "WheelRight"
    WHEEL_VERTICAL = "WheelVertical"
    WHEEL_HORIZONTAL = "WheelHorizontal"


class MouseDragInput(_AtomEnum):
    """Left button held while the pointer moves."""

    MOUSE_DRAG = "MouseDrag"


InputAtom: TypeAlias = (
    KeyboardInput | MouseClickInput | MouseMovementInput | MouseWheelInput | MouseDragInput
)

ATOM_CATEGORIES: dict[type[_AtomEnum], InputCategory] = {
    KeyboardInput: InputCategory.KEYBOARD,
    MouseClickInput: InputCategory.MOUSE_CLICK,
    MouseMovementInput: InputCategory.MOUSE_MOVEMENT,
    MouseWheelInput: InputCategory.MOUSE_WHEEL,
    MouseDragInput: InputCategory.MOUSE_DRAG,
}

ATOM_TYPES: dict[InputCategory, type[_AtomEnum]] = {
    category: atom_type for atom_type, category in ATOM_CATEGORIES.items()
}

# Keyword resolution probes categories in this order and keeps the first match.
RESOLUTION_ORDER: tuple[InputCategory, ...] = (
    InputCategory.KEYBOARD,
    InputCategory.MOUSE_CLICK,
    InputCategory.MOUSE_MOVEMENT,
    InputCategory.MOUSE_WHEEL,
    InputCategory.MOUSE_DRAG,
)


def is_input_atom(value: object) -> bool:
    """Return whether value is a member of one of the atom enums."""
    return type(value) in ATOM_CATEGORIES


__all__ = [
    "ATOM_CATEGORIES",
    "ATOM_TYPES",
    "InputAtom",
    "InputCategory",
    "KeyboardInput",
    "MouseClickInput",
    "MouseDragInput",
    "MouseMovementInput",
    "MouseWheelInput",
    "RESOLUTION_ORDER",
    "is_input_atom",
]
