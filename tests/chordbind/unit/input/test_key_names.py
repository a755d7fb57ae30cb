from __future__ import annotations

import pytest

from chordbind.api.atoms import KeyboardInput as K
from chordbind.api.atoms import MouseClickInput
from chordbind.input.key_names import click_atom_for_button, key_atom_for_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Control", K.LCTRL),
        ("Shift", K.LSHIFT),
        ("AltGraph", K.RALT),
        ("Meta", K.LWIN),
        ("ArrowUp", K.UP),
        ("PrintScreen", K.PRTSCR),
        (" ", K.SPACE),
        ("-", K.MINUS),
        ("a", K.A),
        ("F5", K.F5),
        ("Enter", K.RETURN),
        ("Escape", K.ESC),
        ("Tab", K.TAB),
        ("Ctrl", K.LCTRL),
        (";", K.SEMICOLON),
    ],
)
def test_key_atom_for_name(name: str, expected: K) -> None:
    assert key_atom_for_name(name) is expected


@pytest.mark.parametrize("name", ["Click", "MouseDrag", "Dead", ""])
def test_key_atom_for_name_rejects_non_keyboard_names(name: str) -> None:
    assert key_atom_for_name(name) is None


def test_click_atom_for_button() -> None:
    assert click_atom_for_button(1) is MouseClickInput.LEFT_CLICK
    assert click_atom_for_button(2) is MouseClickInput.RIGHT_CLICK
    assert click_atom_for_button(3) is MouseClickInput.MIDDLE_CLICK
    assert click_atom_for_button(0) is None
    assert click_atom_for_button(5) is None
