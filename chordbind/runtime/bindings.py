"""Action-to-chord binding table."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Generic

from chordbind.api.atoms import InputAtom
from chordbind.api.bindings import TAction
from chordbind.api.expression import AndNode, AtomNode, ExpressionNode, NotNode, OrNode
from chordbind.api.parser import ExpressionParser
from chordbind.runtime.evaluator import evaluate, referenced_atoms
from chordbind.runtime.parser import RuntimeExpressionParser

logger = logging.getLogger(__name__)

_NODE_TYPES = (AtomNode, AndNode, OrNode, NotNode)


class RuntimeActionBindings(Generic[TAction]):
    """Maps logical actions to compiled chords."""

    def __init__(self, *, parser: ExpressionParser | None = None) -> None:
        self._parser: ExpressionParser = parser if parser is not None else RuntimeExpressionParser()
        self._trees: dict[TAction, ExpressionNode] = {}

    def bind(self, action: TAction, expression: str) -> ExpressionNode | None:
        """Compile and store a chord; parse errors leave the old binding in place."""
        tree = self._parser.parse(expression)
        if tree is None:
            self.unbind(action)
            return None
        self._trees[action] = tree
        logger.debug("action_bound action=%r chord=%s", action, tree)
        return tree

    def bind_tree(self, action: TAction, tree: ExpressionNode) -> None:
        if not isinstance(tree, _NODE_TYPES):
            raise TypeError(f"tree must be an expression node, got {type(tree).__name__}")
        self._trees[action] = tree

    def unbind(self, action: TAction) -> None:
        if self._trees.pop(action, None) is not None:
            logger.debug("action_unbound action=%r", action)

    def expression_for(self, action: TAction) -> ExpressionNode | None:
        return self._trees.get(action)

    def actions(self) -> tuple[TAction, ...]:
        return tuple(self._trees)

    def is_active(self, action: TAction, active: Collection[InputAtom]) -> bool:
        tree = self._trees.get(action)
        if tree is None:
            return False
        return evaluate(tree, active)

    def active_actions(self, active: Collection[InputAtom]) -> frozenset[TAction]:
        return frozenset(action for action, tree in self._trees.items() if evaluate(tree, active))

    def relevant_atoms(self) -> frozenset[InputAtom]:
        found: set[InputAtom] = set()
        for tree in self._trees.values():
            found |= referenced_atoms(tree)
        return frozenset(found)

    def __len__(self) -> int:
        return len(self._trees)

    def __contains__(self, action: object) -> bool:
        return action in self._trees


__all__ = ["RuntimeActionBindings"]
