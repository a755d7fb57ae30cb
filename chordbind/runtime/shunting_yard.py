"""Infix-to-postfix conversion for expression tokens."""

from __future__ import annotations

from collections.abc import Iterable

from chordbind.api.errors import UnclosedOpeningParenthesisError, UnopenedClosingParenthesisError
from chordbind.runtime.tokenizer import Token, TokenKind

# Higher binds tighter. Parentheses sit below every operator so they act as
# a boundary when popping.
TOKEN_PRIORITIES: dict[TokenKind, int] = {
    TokenKind.OPEN_PAREN: 1,
    TokenKind.CLOSE_PAREN: 1,
    TokenKind.OR: 2,
    TokenKind.AND: 3,
    TokenKind.NOT: 4,
}


def token_priority(kind: TokenKind) -> int:
    """Return operator/parenthesis priority; keywords have none."""
    priority = TOKEN_PRIORITIES.get(kind)
    if priority is None:
        expected = ", ".join(f"`{k.value}`" for k in TOKEN_PRIORITIES)
        raise ValueError(f"token kind {kind.name} has no priority; expected one of {expected}")
    return priority


def to_postfix(tokens: Iterable[Token], expression: str) -> list[Token]:
    """Reorder infix tokens into postfix order.

    ``expression`` is only used for error reporting. Every operator pops
    while the stack top has priority >= its own, which folds runs of the
    same operator to the left.
    """
    operators: list[Token] = []
    postfix: list[Token] = []

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.KEYWORD:
            postfix.append(token)
        elif kind is TokenKind.OPEN_PAREN:
            operators.append(token)
        elif kind is TokenKind.CLOSE_PAREN:
            while True:
                if not operators:
                    raise UnopenedClosingParenthesisError(
                        expression, fragment=token.text, position=token.position
                    )
                top = operators.pop()
                if top.kind is TokenKind.OPEN_PAREN:
                    break
                postfix.append(top)
        else:
            priority = token_priority(kind)
            while operators and token_priority(operators[-1].kind) >= priority:
                postfix.append(operators.pop())
            operators.append(token)

    while operators:
        top = operators.pop()
        if top.kind is TokenKind.OPEN_PAREN:
            raise UnclosedOpeningParenthesisError(expression, fragment=top.text, position=top.position)
        postfix.append(top)

    return postfix


__all__ = ["TOKEN_PRIORITIES", "to_postfix", "token_priority"]
