from __future__ import annotations

import pytest

from chordbind.api.atoms import KeyboardInput as K
from chordbind.api.atoms import MouseClickInput
from chordbind.runtime.evaluator import evaluate, referenced_atoms
from chordbind.runtime.parser import RuntimeExpressionParser


def _parse(expression: str):
    tree = RuntimeExpressionParser(trace_enabled=False).parse(expression)
    assert tree is not None
    return tree


@pytest.mark.parametrize(
    ("active", "expected"),
    [
        (set(), False),
        ({K.A}, True),
        ({K.B}, False),
        ({K.A, K.B}, False),
        ({K.A, K.C}, True),
    ],
)
def test_and_not_truth_table(active: set[K], expected: bool) -> None:
    assert evaluate(_parse("A + !B"), active) is expected


def test_composite_holds_for_either_side() -> None:
    tree = _parse("Ctrl + S")
    assert evaluate(tree, {K.LCTRL, K.S})
    assert evaluate(tree, frozenset({K.RCTRL, K.S}))
    assert not evaluate(tree, [K.S])


def test_composite_atom_itself_is_never_active() -> None:
    assert not evaluate(_parse("Ctrl"), {K.CTRL})


def test_evaluate_rejects_non_nodes() -> None:
    with pytest.raises(TypeError):
        evaluate("A", {K.A})  # type: ignore[arg-type]


def test_referenced_atoms_collects_leaves() -> None:
    tree = _parse("(Click | !Shift) + A")
    assert referenced_atoms(tree) == {MouseClickInput.LEFT_CLICK, K.LSHIFT, K.RSHIFT, K.A}


def test_referenced_atoms_rejects_non_nodes() -> None:
    with pytest.raises(TypeError):
        referenced_atoms(object())  # type: ignore[arg-type]


def test_long_chains_evaluate_without_recursion() -> None:
    conjunction = _parse(" + ".join(["A"] * 1500))
    assert evaluate(conjunction, {K.A})
    assert not evaluate(conjunction, {K.B})
    disjunction = _parse(" | ".join(["B"] * 1499 + ["A"]))
    assert evaluate(disjunction, {K.A})
    assert referenced_atoms(disjunction) == {K.A, K.B}
