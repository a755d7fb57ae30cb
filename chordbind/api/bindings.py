"""Public action-binding table contracts."""

from __future__ import annotations

from collections.abc import Collection, Hashable
from typing import Protocol, TypeVar

from chordbind.api.atoms import InputAtom
from chordbind.api.expression import ExpressionNode
from chordbind.api.parser import ExpressionParser

TAction = TypeVar("TAction", bound=Hashable)


class ActionBindings(Protocol[TAction]):
    """Own one compiled chord per logical action."""

    def bind(self, action: TAction, expression: str) -> ExpressionNode | None:
        """Compile and store a chord; an empty expression removes the binding."""

    def bind_tree(self, action: TAction, tree: ExpressionNode) -> None:
        """Store an already-built chord."""

    def unbind(self, action: TAction) -> None:
        """Remove a binding if present."""

    def expression_for(self, action: TAction) -> ExpressionNode | None:
        """Return the bound chord, if any."""

    def actions(self) -> tuple[TAction, ...]:
        """Return bound actions in binding order."""

    def is_active(self, action: TAction, active: Collection[InputAtom]) -> bool:
        """Return whether the action's chord holds; unbound actions are inactive."""

    def active_actions(self, active: Collection[InputAtom]) -> frozenset[TAction]:
        """Return every action whose chord holds."""

    def relevant_atoms(self) -> frozenset[InputAtom]:
        """Return atoms referenced by any bound chord."""


def create_action_bindings(
    *,
    parser: ExpressionParser | None = None,
) -> ActionBindings[TAction]:
    """Create default binding-table implementation."""
    from chordbind.runtime.bindings import RuntimeActionBindings

    return RuntimeActionBindings(parser=parser)


__all__ = ["ActionBindings", "TAction", "create_action_bindings"]
