"""Expression tokenizer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

AND = "+"
OR = "|"
NOT = "!"
OPEN_PAREN = "("
CLOSE_PAREN = ")"


class TokenKind(Enum):
    AND = "+"
    OR = "|"
    NOT = "!"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    KEYWORD = "keyword"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit and its character offset in the source expression."""

    kind: TokenKind
    text: str
    position: int

    @property
    def is_operator(self) -> bool:
        return self.kind in _OPERATOR_KINDS


_OPERATOR_KINDS = frozenset({TokenKind.AND, TokenKind.OR, TokenKind.NOT})
_SYMBOL_KINDS: dict[str, TokenKind] = {
    AND: TokenKind.AND,
    OR: TokenKind.OR,
    NOT: TokenKind.NOT,
    OPEN_PAREN: TokenKind.OPEN_PAREN,
    CLOSE_PAREN: TokenKind.CLOSE_PAREN,
}

# Symbols match one character at a time; anything else up to a symbol or
# separator (space, newline, carriage return) is one keyword.
_TOKEN_PATTERN = re.compile(r"[()+|!]|[^()+|! \n\r]+")


def tokenize(expression: str) -> list[Token]:
    """Split expression text into tokens; separators produce nothing."""
    return [
        Token(
            kind=_SYMBOL_KINDS.get(match.group(), TokenKind.KEYWORD),
            text=match.group(),
            position=match.start(),
        )
        for match in _TOKEN_PATTERN.finditer(expression)
    ]


__all__ = ["AND", "CLOSE_PAREN", "NOT", "OPEN_PAREN", "OR", "Token", "TokenKind", "tokenize"]
