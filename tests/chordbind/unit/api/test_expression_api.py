from __future__ import annotations

import pytest

import chordbind
from chordbind.api.atoms import InputCategory, KeyboardInput, MouseClickInput, MouseMovementInput, is_input_atom
from chordbind.api.errors import (
    ExpressionParseError,
    InvalidKeywordError,
    ParseErrorKind,
    UnexpectedOperatorError,
)
from chordbind.api.expression import (
    AndNode,
    AtomNode,
    NotNode,
    OrNode,
    and_,
    atom,
    evaluate,
    fold_expression,
    format_expression,
    not_,
    or_,
    referenced_atoms,
)
from chordbind.api.parser import create_expression_parser, parse_expression


def test_atoms_are_not_strings_and_know_their_category() -> None:
    assert KeyboardInput.A != "A"
    assert KeyboardInput.A.category is InputCategory.KEYBOARD
    assert MouseMovementInput.MOUSE_LEFT.category is InputCategory.MOUSE_MOVEMENT
    assert MouseClickInput.LEFT_CLICK.canonical_name == "LeftClick"
    assert str(KeyboardInput.PAGE_DOWN) == "PageDown"


def test_is_input_atom() -> None:
    assert is_input_atom(KeyboardInput.A)
    assert not is_input_atom("A")
    assert not is_input_atom(InputCategory.KEYBOARD)


def test_nodes_are_immutable_and_structurally_equal() -> None:
    node = atom(KeyboardInput.A)
    assert node == AtomNode(KeyboardInput.A)
    assert node.category is InputCategory.KEYBOARD
    with pytest.raises(AttributeError):
        node.atom = KeyboardInput.B  # type: ignore[misc]


def test_rendering_is_fully_parenthesized() -> None:
    tree = and_(atom(KeyboardInput.A), not_(or_(atom(KeyboardInput.LCTRL), atom(KeyboardInput.RCTRL))))
    assert str(tree) == "(A + !(LCtrl | RCtrl))"
    assert format_expression(tree) == "(A + !(LCtrl | RCtrl))"
    assert format_expression(None) == ""


def test_rendering_parses_back_to_the_same_tree() -> None:
    tree = parse_expression("(Click | Enter + (!Ctrl | !Alt | !Win) | ;) + Shift | MouseMoveLeft")
    assert tree is not None
    assert parse_expression(str(tree)) == tree


def test_nested_negation_renders_in_parseable_form() -> None:
    tree = not_(not_(atom(KeyboardInput.A)))
    assert str(tree) == "!(!A)"
    assert parse_expression(str(tree)) == tree


def test_long_chains_render_compare_and_hash_without_recursion() -> None:
    expression = " | ".join(["A"] * 1500)
    tree = parse_expression(expression)
    twin = parse_expression(expression)
    assert tree is not None
    rendered = str(tree)
    assert rendered.startswith("(" * 1499 + "A | A)")
    assert parse_expression(rendered) == tree
    assert tree == twin
    assert hash(tree) == hash(twin)
    assert tree != parse_expression(" + ".join(["A"] * 1500))
    assert repr(tree).startswith("OrNode(left=OrNode(left=")


def test_nodes_compare_by_structure_and_kind() -> None:
    a, b = atom(KeyboardInput.A), atom(KeyboardInput.B)
    assert AndNode(a, b) != OrNode(a, b)
    assert AndNode(a, b) != AndNode(b, a)
    assert NotNode(a) == not_(atom(KeyboardInput.A))
    assert len({AndNode(a, b), and_(a, b), OrNode(a, b)}) == 2
    assert AndNode(a, b) != "(A + B)"
    assert repr(NotNode(a)) == f"NotNode(operand=AtomNode(atom={KeyboardInput.A!r}))"


def test_fold_expression_reduces_bottom_up() -> None:
    tree = and_(atom(KeyboardInput.A), not_(or_(atom(KeyboardInput.B), atom(KeyboardInput.C))))
    depth = fold_expression(
        tree,
        lambda leaf: 1,
        lambda _, operand: operand + 1,
        lambda _, left, right: max(left, right) + 1,
    )
    assert depth == 4
    with pytest.raises(TypeError):
        fold_expression("A", str, str, str)  # type: ignore[arg-type]


def test_lazy_evaluation_helpers() -> None:
    tree = and_(atom(KeyboardInput.A), not_(atom(KeyboardInput.B)))
    assert evaluate(tree, {KeyboardInput.A})
    assert not evaluate(tree, {KeyboardInput.A, KeyboardInput.B})
    assert referenced_atoms(tree) == {KeyboardInput.A, KeyboardInput.B}


def test_package_level_parse() -> None:
    assert chordbind.parse("Click") == atom(MouseClickInput.LEFT_CLICK)
    with pytest.raises(chordbind.ExpressionParseError):
        chordbind.parse("Click +")


def test_create_expression_parser_honours_trace_override() -> None:
    parser = create_expression_parser(trace_enabled=True)
    assert parser.parse("") is None


def test_errors_carry_structured_fields() -> None:
    error = InvalidKeywordError("A + Nope", fragment="Nope", position=4)
    assert error.kind is ParseErrorKind.INVALID_KEYWORD
    assert error.expression == "A + Nope"
    assert error.keyword == "Nope"
    assert error.position == 4
    assert isinstance(error, ExpressionParseError)
    assert isinstance(error, ValueError)


def test_unexpected_operator_message_names_the_operator() -> None:
    error = UnexpectedOperatorError("A |", fragment="|", position=2)
    assert error.operator == "|"
    assert str(error) == "Unexpected `|` operator for input `A |`"
