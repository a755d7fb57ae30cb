from __future__ import annotations

import pytest

from chordbind.api.atoms import (
    ATOM_TYPES,
    InputCategory,
    KeyboardInput,
    MouseClickInput,
    MouseMovementInput,
    MouseWheelInput,
)
from chordbind.api.errors import CatalogError
from chordbind.runtime.catalog import (
    ALIAS_TABLES,
    COMPOSITES,
    aliases_for,
    build_alias_table,
    cross_category_aliases,
    is_composite,
)


def test_tables_follow_resolution_order() -> None:
    assert [table.category for table in ALIAS_TABLES] == [
        InputCategory.KEYBOARD,
        InputCategory.MOUSE_CLICK,
        InputCategory.MOUSE_MOVEMENT,
        InputCategory.MOUSE_WHEEL,
        InputCategory.MOUSE_DRAG,
    ]


def test_every_atom_is_reachable_by_its_canonical_name_in_its_table() -> None:
    for table in ALIAS_TABLES:
        for member in ATOM_TYPES[table.category]:
            assert table.lookup(member.value) is member


def test_lookup_is_case_insensitive() -> None:
    keyboard = ALIAS_TABLES[0]
    assert keyboard.lookup("ESCAPE") is KeyboardInput.ESC
    assert "Escape" in keyboard
    assert 3 not in keyboard


def test_wheel_and_movement_aliases_are_generated() -> None:
    wheel = ALIAS_TABLES[3]
    movement = ALIAS_TABLES[2]
    assert wheel.lookup("ScrollUp") is MouseWheelInput.WHEEL_UP
    assert wheel.lookup("MouseScrollHorizontal") is MouseWheelInput.WHEEL_HORIZONTAL
    assert movement.lookup("MouseMoveLeft") is MouseMovementInput.MOUSE_LEFT


def test_aliases_for_starts_with_canonical_name() -> None:
    assert aliases_for(MouseClickInput.LEFT_CLICK) == ("LeftClick", "MouseLeft", "MouseClick", "Click")
    assert aliases_for(MouseMovementInput.MOUSE_DOWN)[0] == "MouseDown"


def test_composites_pair_leaves_of_the_same_category() -> None:
    for member, (first, second) in COMPOSITES.items():
        assert is_composite(member)
        assert first.category is member.category
        assert second.category is member.category
        assert not is_composite(first)
        assert not is_composite(second)
    assert not is_composite(KeyboardInput.A)


def test_cross_category_aliases_are_only_mouse_left_and_right() -> None:
    assert cross_category_aliases() == {
        "mouseleft": (InputCategory.MOUSE_CLICK, InputCategory.MOUSE_MOVEMENT),
        "mouseright": (InputCategory.MOUSE_CLICK, InputCategory.MOUSE_MOVEMENT),
    }


def test_build_alias_table_rejects_alias_shared_within_category() -> None:
    with pytest.raises(CatalogError):
        build_alias_table(
            InputCategory.KEYBOARD,
            {KeyboardInput.A: ("shared",), KeyboardInput.B: ("Shared",)},
        )


def test_build_alias_table_rejects_alias_equal_to_other_canonical_name() -> None:
    with pytest.raises(CatalogError):
        build_alias_table(InputCategory.KEYBOARD, {KeyboardInput.A: ("b",)})


def test_build_alias_table_rejects_foreign_atoms_and_empty_aliases() -> None:
    with pytest.raises(CatalogError):
        build_alias_table(InputCategory.KEYBOARD, {MouseClickInput.LEFT_CLICK: ("x",)})
    with pytest.raises(CatalogError):
        build_alias_table(InputCategory.KEYBOARD, {KeyboardInput.A: ("",)})
