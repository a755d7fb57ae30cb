"""Static alias catalog for every input category.

Tables are built once at import and never mutated. Each canonical name is
an alias of its own atom; the extra aliases below are declared in the order
they are preferred for display. Lookup keys are lower-cased but otherwise
stored verbatim, so punctuation aliases such as ``"-"`` stay in the table.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chordbind.api.atoms import (
    ATOM_TYPES,
    RESOLUTION_ORDER,
    InputAtom,
    InputCategory,
    KeyboardInput,
    MouseClickInput,
    MouseDragInput,
    MouseMovementInput,
    MouseWheelInput,
)
from chordbind.api.errors import CatalogError

_KEYBOARD_ALIASES: dict[InputAtom, tuple[str, ...]] = {
    KeyboardInput.CTRL: ("control",),
    KeyboardInput.LCTRL: ("lcontrol",),
    KeyboardInput.RCTRL: ("rcontrol",),
    KeyboardInput.SHIFT: ("shft",),
    KeyboardInput.LSHIFT: ("lshft",),
    KeyboardInput.RSHIFT: ("rshft",),
    KeyboardInput.ALT: ("opt", "option"),
    KeyboardInput.LALT: ("lopt", "loption"),
    KeyboardInput.RALT: ("ropt", "roption"),
    KeyboardInput.WIN: ("windows", "cmd", "command"),
    KeyboardInput.LWIN: ("lwindows", "lcmd", "lcommand"),
    KeyboardInput.RWIN: ("rwindows", "rcmd", "rcommand"),
    KeyboardInput.CAPS: ("capslock",),
    KeyboardInput.KEY0: ("0",),
    KeyboardInput.KEY1: ("1",),
    KeyboardInput.KEY2: ("2",),
    KeyboardInput.KEY3: ("3",),
    KeyboardInput.KEY4: ("4",),
    KeyboardInput.KEY5: ("5",),
    KeyboardInput.KEY6: ("6",),
    KeyboardInput.KEY7: ("7",),
    KeyboardInput.KEY8: ("8",),
    KeyboardInput.KEY9: ("9",),
    KeyboardInput.ESC: ("escape",),
    KeyboardInput.PRTSCR: ("prtsc", "sysreq", "screenshot"),
    KeyboardInput.SCROLL_LOCK: ("scroll",),
    KeyboardInput.PAUSE: ("break",),
    KeyboardInput.INSERT: ("ins",),
    KeyboardInput.DELETE: ("del",),
    KeyboardInput.PAGE_DOWN: ("pgdown", "paged"),
    KeyboardInput.PAGE_UP: ("pgup", "pageu"),
    KeyboardInput.UP: ("uparrow",),
    KeyboardInput.LEFT: ("leftarrow",),
    KeyboardInput.DOWN: ("downarrow",),
    KeyboardInput.RIGHT: ("rightarrow",),
    KeyboardInput.BACKSPACE: ("back",),
    KeyboardInput.RETURN: ("enter",),
    KeyboardInput.SPACE: ("spacebar",),
    KeyboardInput.NUMPAD0: ("num0",),
    KeyboardInput.NUMPAD1: ("num1",),
    KeyboardInput.NUMPAD2: ("num2",),
    KeyboardInput.NUMPAD3: ("num3",),
    KeyboardInput.NUMPAD4: ("num4",),
    KeyboardInput.NUMPAD5: ("num5",),
    KeyboardInput.NUMPAD6: ("num6",),
    KeyboardInput.NUMPAD7: ("num7",),
    KeyboardInput.NUMPAD8: ("num8",),
    KeyboardInput.NUMPAD9: ("num9",),
    KeyboardInput.GRAVE: ("backtik", "backtick", "`"),
    # Unreachable from expressions: keywords lose their hyphens before lookup.
    KeyboardInput.MINUS: ("-",),
    KeyboardInput.EQUALS: ("eq", "="),
    KeyboardInput.BACKSLASH: ("\\",),
    KeyboardInput.SEMICOLON: (";",),
    KeyboardInput.APOSTROPHE: ("'",),
    KeyboardInput.COMMA: (",",),
    KeyboardInput.PERIOD: ("fullstop", "."),
    KeyboardInput.SLASH: ("forwardslash", "/"),
}

_MOUSE_CLICK_ALIASES: dict[InputAtom, tuple[str, ...]] = {
    MouseClickInput.LEFT_CLICK: ("MouseLeft", "MouseClick", "Click"),
    MouseClickInput.MIDDLE_CLICK: ("MouseMiddle",),
    MouseClickInput.RIGHT_CLICK: ("MouseRight",),
    MouseClickInput.DOUBLE_CLICK: ("MouseDouble",),
}


def _directional(canonical: str, *prefixes: str) -> tuple[str, ...]:
    suffix = canonical.removeprefix("Mouse").removeprefix("Wheel")
    return tuple(f"{prefix}{suffix}" for prefix in prefixes)


_MOUSE_MOVEMENT_ALIASES: dict[InputAtom, tuple[str, ...]] = {
    member: _directional(member.value, "MouseMove", "MouseMovement")
    for member in MouseMovementInput
}

_MOUSE_WHEEL_ALIASES: dict[InputAtom, tuple[str, ...]] = {
    member: _directional(member.value, "MouseWheel", "Scroll", "MouseScroll")
    for member in MouseWheelInput
}

_MOUSE_DRAG_ALIASES: dict[InputAtom, tuple[str, ...]] = {}

CATALOG_ALIASES: Mapping[InputCategory, Mapping[InputAtom, tuple[str, ...]]] = MappingProxyType(
    {
        InputCategory.KEYBOARD: MappingProxyType(_KEYBOARD_ALIASES),
        InputCategory.MOUSE_CLICK: MappingProxyType(_MOUSE_CLICK_ALIASES),
        InputCategory.MOUSE_MOVEMENT: MappingProxyType(_MOUSE_MOVEMENT_ALIASES),
        InputCategory.MOUSE_WHEEL: MappingProxyType(_MOUSE_WHEEL_ALIASES),
        InputCategory.MOUSE_DRAG: MappingProxyType(_MOUSE_DRAG_ALIASES),
    }
)

# Composite atoms resolve to an Or of exactly these two leaves.
COMPOSITES: Mapping[InputAtom, tuple[InputAtom, InputAtom]] = MappingProxyType(
    {
        KeyboardInput.CTRL: (KeyboardInput.LCTRL, KeyboardInput.RCTRL),
        KeyboardInput.SHIFT: (KeyboardInput.LSHIFT, KeyboardInput.RSHIFT),
        KeyboardInput.ALT: (KeyboardInput.LALT, KeyboardInput.RALT),
        KeyboardInput.WIN: (KeyboardInput.LWIN, KeyboardInput.RWIN),
        MouseMovementInput.MOUSE_VERTICAL: (
            MouseMovementInput.MOUSE_UP,
            MouseMovementInput.MOUSE_DOWN,
        ),
        MouseMovementInput.MOUSE_HORIZONTAL: (
            MouseMovementInput.MOUSE_LEFT,
            MouseMovementInput.MOUSE_RIGHT,
        ),
        MouseWheelInput.WHEEL_VERTICAL: (MouseWheelInput.WHEEL_UP, MouseWheelInput.WHEEL_DOWN),
        MouseWheelInput.WHEEL_HORIZONTAL: (
            MouseWheelInput.WHEEL_LEFT,
            MouseWheelInput.WHEEL_RIGHT,
        ),
    }
)


@dataclass(frozen=True, slots=True)
class AliasTable:
    """Case-insensitive alias lookup for one category."""

    category: InputCategory
    entries: Mapping[str, InputAtom]

    def lookup(self, name: str) -> InputAtom | None:
        return self.entries.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


def build_alias_table(
    category: InputCategory,
    aliases: Mapping[InputAtom, tuple[str, ...]],
) -> AliasTable:
    """Build one category table, rejecting aliases claimed by two atoms."""
    atom_type = ATOM_TYPES[category]
    entries: dict[str, InputAtom] = {}
    for member in aliases:
        if not isinstance(member, atom_type):
            raise CatalogError(f"{member!r} does not belong to category {category.value}")
    for member in atom_type:
        for name in (member.value, *aliases.get(member, ())):
            key = str(name).lower()
            if not key:
                raise CatalogError(f"empty alias declared for {category.value}.{member.value}")
            existing = entries.get(key)
            if existing is not None and existing is not member:
                raise CatalogError(
                    f"alias {name!r} maps to both {existing.value} and {member.value} "
                    f"in category {category.value}"
                )
            entries[key] = member
    return AliasTable(category=category, entries=MappingProxyType(entries))


def build_alias_tables(
    catalog: Mapping[InputCategory, Mapping[InputAtom, tuple[str, ...]]] = CATALOG_ALIASES,
) -> tuple[AliasTable, ...]:
    """Build all tables in resolution order."""
    return tuple(build_alias_table(category, catalog.get(category, {})) for category in RESOLUTION_ORDER)


ALIAS_TABLES: tuple[AliasTable, ...] = build_alias_tables()


def aliases_for(member: InputAtom) -> tuple[str, ...]:
    """Canonical name followed by declared aliases."""
    declared = CATALOG_ALIASES[member.category].get(member, ())
    return (member.value, *declared)


def is_composite(member: InputAtom) -> bool:
    return member in COMPOSITES


def cross_category_aliases(
    tables: tuple[AliasTable, ...] = ALIAS_TABLES,
) -> dict[str, tuple[InputCategory, ...]]:
    """Return aliases present in more than one category, in resolution order.

    The first category listed for an alias is the one resolution picks.
    """
    seen: dict[str, list[InputCategory]] = {}
    for table in tables:
        for key in table:
            seen.setdefault(key, []).append(table.category)
    return {key: tuple(categories) for key, categories in sorted(seen.items()) if len(categories) > 1}


__all__ = [
    "ALIAS_TABLES",
    "AliasTable",
    "CATALOG_ALIASES",
    "COMPOSITES",
    "aliases_for",
    "build_alias_table",
    "build_alias_tables",
    "cross_category_aliases",
    "is_composite",
]
