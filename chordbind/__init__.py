"""Input-binding expression compiler."""

from typing import TYPE_CHECKING

from chordbind.api.errors import ExpressionParseError

if TYPE_CHECKING:
    from chordbind.api.expression import ExpressionNode


def parse(expression: str) -> "ExpressionNode | None":
    """Compile one binding expression into a boolean tree."""
    from chordbind.api.parser import parse_expression

    return parse_expression(expression)


__all__ = ["ExpressionParseError", "parse"]
