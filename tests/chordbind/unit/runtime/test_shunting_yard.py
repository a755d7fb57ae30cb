from __future__ import annotations

import pytest

from chordbind.api.errors import UnclosedOpeningParenthesisError, UnopenedClosingParenthesisError
from chordbind.runtime.shunting_yard import to_postfix, token_priority
from chordbind.runtime.tokenizer import TokenKind, tokenize


def _postfix(expression: str) -> str:
    return " ".join(token.text for token in to_postfix(tokenize(expression), expression))


def test_priorities_order_not_over_and_over_or_over_parentheses() -> None:
    assert token_priority(TokenKind.NOT) > token_priority(TokenKind.AND)
    assert token_priority(TokenKind.AND) > token_priority(TokenKind.OR)
    assert token_priority(TokenKind.OR) > token_priority(TokenKind.OPEN_PAREN)
    assert token_priority(TokenKind.OPEN_PAREN) == token_priority(TokenKind.CLOSE_PAREN)


def test_keyword_has_no_priority() -> None:
    with pytest.raises(ValueError):
        token_priority(TokenKind.KEYWORD)


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("A | B | C", "A B | C |"),
        ("A + B + C", "A B + C +"),
        ("A | B + C", "A B C + |"),
        ("A + B | C", "A B + C |"),
        ("(A | B) + C", "A B | C +"),
        ("!A + B", "A ! B +"),
        ("!!A", "! A !"),
        ("!(!A)", "A ! !"),
        ("!(A | B)", "A B | !"),
    ],
)
def test_to_postfix_orders_by_priority(expression: str, expected: str) -> None:
    assert _postfix(expression) == expected


def test_to_postfix_drops_parentheses() -> None:
    assert _postfix("((A))") == "A"
    assert _postfix("()") == ""


def test_unopened_closing_parenthesis_reports_position() -> None:
    expression = "Click + Shift) | (RightClick + Tab)"
    with pytest.raises(UnopenedClosingParenthesisError) as exc_info:
        to_postfix(tokenize(expression), expression)
    assert exc_info.value.position == 13
    assert exc_info.value.fragment == ")"


def test_unclosed_opening_parenthesis_reports_position() -> None:
    expression = "(Click + Shift) | (RightClick + Tab"
    with pytest.raises(UnclosedOpeningParenthesisError) as exc_info:
        to_postfix(tokenize(expression), expression)
    assert exc_info.value.position == 18
