"""Host key-name and pointer-button translation to atoms."""

from __future__ import annotations

from chordbind.api.atoms import InputAtom, KeyboardInput, MouseClickInput
from chordbind.runtime.catalog import COMPOSITES
from chordbind.runtime.resolver import resolve_atom

# Browser-style names reported by rendercanvas that the catalog does not know.
# Hosts without side information report the left-hand modifier.
HOST_KEY_NAMES: dict[str, KeyboardInput] = {
    "control": KeyboardInput.LCTRL,
    "shift": KeyboardInput.LSHIFT,
    "alt": KeyboardInput.LALT,
    "altgraph": KeyboardInput.RALT,
    "meta": KeyboardInput.LWIN,
    "os": KeyboardInput.LWIN,
    "super": KeyboardInput.LWIN,
    "arrowup": KeyboardInput.UP,
    "arrowdown": KeyboardInput.DOWN,
    "arrowleft": KeyboardInput.LEFT,
    "arrowright": KeyboardInput.RIGHT,
    "printscreen": KeyboardInput.PRTSCR,
    " ": KeyboardInput.SPACE,
    # Hyphens are stripped from keywords, so the catalog alias never matches.
    "-": KeyboardInput.MINUS,
}

POINTER_BUTTONS: dict[int, MouseClickInput] = {
    1: MouseClickInput.LEFT_CLICK,
    2: MouseClickInput.RIGHT_CLICK,
    3: MouseClickInput.MIDDLE_CLICK,
}


def key_atom_for_name(name: str) -> KeyboardInput | None:
    """Translate a host key name into a keyboard atom.

    Composite names resolve to their left-hand atom; names that only match
    a mouse alias are rejected.
    """
    normalized = name.lower()
    host = HOST_KEY_NAMES.get(normalized)
    if host is not None:
        return host
    found: InputAtom | None = resolve_atom(normalized.strip())
    if not isinstance(found, KeyboardInput):
        return None
    leaves = COMPOSITES.get(found)
    if leaves is not None:
        left = leaves[0]
        return left if isinstance(left, KeyboardInput) else None
    return found


def click_atom_for_button(button: int) -> MouseClickInput | None:
    return POINTER_BUTTONS.get(int(button))


__all__ = ["HOST_KEY_NAMES", "POINTER_BUTTONS", "click_atom_for_button", "key_atom_for_name"]
