"""Public expression parser contracts."""

from __future__ import annotations

from typing import Protocol

from chordbind.api.expression import ExpressionNode


class ExpressionParser(Protocol):
    """Compile expression text into an immutable tree."""

    def parse(self, expression: str) -> ExpressionNode | None:
        """Return the tree, ``None`` for an empty expression, or raise ``ExpressionParseError``."""


def create_expression_parser(*, trace_enabled: bool | None = None) -> ExpressionParser:
    """Create default parser implementation.

    ``trace_enabled`` overrides ``CHORDBIND_PARSE_TRACE`` when given.
    """
    from chordbind.runtime.parser import RuntimeExpressionParser

    return RuntimeExpressionParser(trace_enabled=trace_enabled)


def parse_expression(expression: str) -> ExpressionNode | None:
    """Compile one expression with the default parser."""
    return create_expression_parser().parse(expression)


__all__ = ["ExpressionParser", "create_expression_parser", "parse_expression"]
