"""Postfix token reduction into an expression tree."""

from __future__ import annotations

from collections.abc import Iterable

from chordbind.api.errors import (
    InvalidKeywordError,
    MalformedExpressionError,
    UnexpectedOperatorError,
)
from chordbind.api.expression import AndNode, ExpressionNode, NotNode, OrNode
from chordbind.runtime.resolver import resolve_keyword
from chordbind.runtime.tokenizer import Token, TokenKind


def build_tree(postfix: Iterable[Token], expression: str) -> ExpressionNode | None:
    """Reduce postfix tokens with an operand stack.

    Returns ``None`` when there are no tokens at all. ``expression`` is only
    used for error reporting.
    """
    operands: list[ExpressionNode] = []
    consumed = 0

    for token in postfix:
        consumed += 1
        kind = token.kind
        if kind is TokenKind.AND or kind is TokenKind.OR:
            if len(operands) < 2:
                raise UnexpectedOperatorError(expression, fragment=token.text, position=token.position)
            right = operands.pop()
            left = operands.pop()
            operands.append(AndNode(left, right) if kind is TokenKind.AND else OrNode(left, right))
        elif kind is TokenKind.NOT:
            if not operands:
                raise UnexpectedOperatorError(expression, fragment=token.text, position=token.position)
            operands.append(NotNode(operands.pop()))
        elif kind is TokenKind.KEYWORD:
            node = resolve_keyword(token.text)
            if node is None:
                raise InvalidKeywordError(expression, fragment=token.text, position=token.position)
            operands.append(node)
        else:
            raise ValueError(f"parenthesis token {token.text!r} cannot appear in postfix order")

    if consumed == 0:
        return None
    if len(operands) != 1:
        raise MalformedExpressionError(expression)
    return operands[0]


__all__ = ["build_tree"]
