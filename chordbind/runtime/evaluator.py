"""Expression tree evaluation against an active input set."""

from __future__ import annotations

from collections.abc import Collection

from chordbind.api.atoms import InputAtom
from chordbind.api.expression import AndNode, AtomNode, ExpressionNode, NotNode, OrNode, fold_expression


def evaluate(node: ExpressionNode, active: Collection[InputAtom]) -> bool:
    """Return whether the chord described by ``node`` holds for ``active``."""

    def combine(branch: AndNode | OrNode, left: bool, right: bool) -> bool:
        if isinstance(branch, AndNode):
            return left and right
        return left or right

    return fold_expression(node, lambda leaf: leaf.atom in active, lambda _, value: not value, combine)


def referenced_atoms(node: ExpressionNode) -> frozenset[InputAtom]:
    found: set[InputAtom] = set()
    pending: list[ExpressionNode] = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, AtomNode):
            found.add(current.atom)
        elif isinstance(current, (AndNode, OrNode)):
            pending.append(current.left)
            pending.append(current.right)
        elif isinstance(current, NotNode):
            pending.append(current.operand)
        else:
            raise TypeError(f"not an expression node: {current!r}")
    return frozenset(found)


__all__ = ["evaluate", "referenced_atoms"]
