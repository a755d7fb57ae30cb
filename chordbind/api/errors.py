"""Public parse error taxonomy.

Every error keeps the structured facts (kind, offending fragment, its
offset and the verbatim expression) so callers such as a settings screen
can phrase their own diagnostics. ``str(error)`` is only a default message.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Closed set of parse failure kinds."""

    UNOPENED_CLOSING_PARENTHESIS = "unopened_closing_parenthesis"
    UNCLOSED_OPENING_PARENTHESIS = "unclosed_opening_parenthesis"
    UNEXPECTED_OPERATOR = "unexpected_operator"
    INVALID_KEYWORD = "invalid_keyword"
    MALFORMED_EXPRESSION = "malformed_expression"


class ExpressionParseError(ValueError):
    """Base class for expression compilation failures."""

    kind: ParseErrorKind = ParseErrorKind.MALFORMED_EXPRESSION

    def __init__(
        self,
        expression: str,
        *,
        fragment: str | None = None,
        position: int | None = None,
    ) -> None:
        self.expression = expression
        self.fragment = fragment
        self.position = position
        super().__init__(self.default_message())

    def default_message(self) -> str:
        return f"Could not parse input `{self.expression}`"


class UnopenedClosingParenthesisError(ExpressionParseError):
    """A ``)`` had no matching ``(``."""

    kind = ParseErrorKind.UNOPENED_CLOSING_PARENTHESIS

    def default_message(self) -> str:
        return f"Unopened closing parenthesis in input `{self.expression}`"


class UnclosedOpeningParenthesisError(ExpressionParseError):
    """A ``(`` was still open at the end of the input."""

    kind = ParseErrorKind.UNCLOSED_OPENING_PARENTHESIS

    def default_message(self) -> str:
        return f"Unclosed opening parenthesis in input `{self.expression}`"


class UnexpectedOperatorError(ExpressionParseError):
    """An operator was reached with too few operands."""

    kind = ParseErrorKind.UNEXPECTED_OPERATOR

    @property
    def operator(self) -> str | None:
        return self.fragment

    def default_message(self) -> str:
        return f"Unexpected `{self.fragment}` operator for input `{self.expression}`"


class InvalidKeywordError(ExpressionParseError):
    """A keyword matched no atom in any category."""

    kind = ParseErrorKind.INVALID_KEYWORD

    @property
    def keyword(self) -> str | None:
        return self.fragment

    def default_message(self) -> str:
        return f"Invalid keyword `{self.fragment}` in input `{self.expression}`"


class MalformedExpressionError(ExpressionParseError):
    """Reduction did not end with exactly one tree."""

    kind = ParseErrorKind.MALFORMED_EXPRESSION

    def default_message(self) -> str:
        return (
            f"Something went wrong parsing the input `{self.expression}`. "
            "Is there a mismatched amount of input keywords?"
        )


class CatalogError(RuntimeError):
    """The static alias catalog is inconsistent."""


__all__ = [
    "CatalogError",
    "ExpressionParseError",
    "InvalidKeywordError",
    "MalformedExpressionError",
    "ParseErrorKind",
    "UnclosedOpeningParenthesisError",
    "UnexpectedOperatorError",
    "UnopenedClosingParenthesisError",
]
