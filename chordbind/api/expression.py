"""Public boolean expression tree over atomic inputs.

Trees produced by long ``A + B + ...`` chains are as deep as they are long,
so rendering, comparison and hashing walk them with explicit stacks.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import TypeAlias, TypeVar

from chordbind.api.atoms import InputAtom, InputCategory

T = TypeVar("T")


class _Node:
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Node):
            return NotImplemented
        return _nodes_equal(self, other)

    def __hash__(self) -> int:
        return fold_expression(
            self,  # type: ignore[arg-type]
            lambda leaf: hash(("atom", leaf.atom)),
            lambda _, value: hash(("not", value)),
            lambda branch, left, right: hash((type(branch).__name__, left, right)),
        )

    def __repr__(self) -> str:
        return fold_expression(
            self,  # type: ignore[arg-type]
            lambda leaf: f"AtomNode(atom={leaf.atom!r})",
            lambda _, value: f"NotNode(operand={value})",
            lambda branch, left, right: f"{type(branch).__name__}(left={left}, right={right})",
        )

    def __str__(self) -> str:
        return _render(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AtomNode(_Node):
    """Leaf: true while ``atom`` is active."""

    atom: InputAtom

    @property
    def category(self) -> InputCategory:
        return self.atom.category


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AndNode(_Node):
    """True while both children are true."""

    left: ExpressionNode
    right: ExpressionNode


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OrNode(_Node):
    """True while either child is true."""

    left: ExpressionNode
    right: ExpressionNode


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class NotNode(_Node):
    """True while the operand is false."""

    operand: ExpressionNode


ExpressionNode: TypeAlias = AtomNode | AndNode | OrNode | NotNode


def fold_expression(
    node: ExpressionNode,
    leaf: Callable[[AtomNode], T],
    unary: Callable[[NotNode, T], T],
    binary: Callable[[AndNode | OrNode, T, T], T],
) -> T:
    """Reduce a tree bottom-up without recursion.

    ``leaf`` maps atoms, ``unary`` combines a ``NotNode`` with its operand's
    value and ``binary`` combines an ``AndNode``/``OrNode`` with the values
    of its left and right children.
    """
    results: list[T] = []
    pending: list[tuple[ExpressionNode, bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if isinstance(current, AtomNode):
            results.append(leaf(current))
        elif isinstance(current, NotNode):
            if children_done:
                results.append(unary(current, results.pop()))
            else:
                pending.append((current, True))
                pending.append((current.operand, False))
        elif isinstance(current, (AndNode, OrNode)):
            if children_done:
                right = results.pop()
                left = results.pop()
                results.append(binary(current, left, right))
            else:
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
        else:
            raise TypeError(f"not an expression node: {current!r}")
    return results[0]


def _nodes_equal(first: object, second: object) -> bool:
    pending: list[tuple[object, object]] = [(first, second)]
    while pending:
        left, right = pending.pop()
        if left is right:
            continue
        if type(left) is not type(right):
            return False
        if isinstance(left, AtomNode) and isinstance(right, AtomNode):
            if left.atom != right.atom:
                return False
        elif isinstance(left, NotNode) and isinstance(right, NotNode):
            pending.append((left.operand, right.operand))
        elif isinstance(left, (AndNode, OrNode)) and isinstance(right, (AndNode, OrNode)):
            pending.append((left.right, right.right))
            pending.append((left.left, right.left))
        elif left != right:
            return False
    return True


def _render(node: ExpressionNode) -> str:
    from chordbind.runtime.resolver import display_name

    def negate(negation: NotNode, operand: str) -> str:
        # nested negation renders as `!(!A)` so it parses back
        if isinstance(negation.operand, NotNode):
            return f"!({operand})"
        return f"!{operand}"

    def combine(branch: AndNode | OrNode, left: str, right: str) -> str:
        symbol = "+" if isinstance(branch, AndNode) else "|"
        return f"({left} {symbol} {right})"

    return fold_expression(node, lambda leaf: display_name(leaf.atom), negate, combine)


def atom(value: InputAtom) -> AtomNode:
    return AtomNode(value)


def and_(left: ExpressionNode, right: ExpressionNode) -> AndNode:
    return AndNode(left, right)


def or_(left: ExpressionNode, right: ExpressionNode) -> OrNode:
    return OrNode(left, right)


def not_(operand: ExpressionNode) -> NotNode:
    return NotNode(operand)


def evaluate(node: ExpressionNode, active: Collection[InputAtom]) -> bool:
    """Evaluate a tree against the set of currently active atoms."""
    from chordbind.runtime.evaluator import evaluate as _evaluate

    return _evaluate(node, active)


def referenced_atoms(node: ExpressionNode) -> frozenset[InputAtom]:
    """Return every atom that appears in the tree."""
    from chordbind.runtime.evaluator import referenced_atoms as _referenced_atoms

    return _referenced_atoms(node)


def format_expression(node: ExpressionNode | None) -> str:
    """Render a tree back to expression text; ``None`` renders as empty text."""
    return "" if node is None else str(node)


__all__ = [
    "AndNode",
    "AtomNode",
    "ExpressionNode",
    "NotNode",
    "OrNode",
    "and_",
    "atom",
    "evaluate",
    "fold_expression",
    "format_expression",
    "not_",
    "or_",
    "referenced_atoms",
]
