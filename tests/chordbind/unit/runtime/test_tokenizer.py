from __future__ import annotations

from chordbind.runtime.tokenizer import Token, TokenKind, tokenize


def test_tokenize_splits_symbols_and_keywords_with_positions() -> None:
    tokens = tokenize("(Ctrl+A) | !B")
    assert [(t.kind, t.text, t.position) for t in tokens] == [
        (TokenKind.OPEN_PAREN, "(", 0),
        (TokenKind.KEYWORD, "Ctrl", 1),
        (TokenKind.AND, "+", 5),
        (TokenKind.KEYWORD, "A", 6),
        (TokenKind.CLOSE_PAREN, ")", 7),
        (TokenKind.OR, "|", 9),
        (TokenKind.NOT, "!", 11),
        (TokenKind.KEYWORD, "B", 12),
    ]


def test_tokenize_treats_space_newline_and_carriage_return_as_separators() -> None:
    assert [t.text for t in tokenize(" Ctrl\n+\rA  ")] == ["Ctrl", "+", "A"]


def test_tokenize_keeps_tab_inside_keyword() -> None:
    assert [t.text for t in tokenize("Ctrl\tA")] == ["Ctrl\tA"]


def test_tokenize_keeps_punctuation_keywords_whole() -> None:
    assert [t.text for t in tokenize("; + l_ctrl")] == [";", "+", "l_ctrl"]


def test_tokenize_empty_and_blank_input_yield_nothing() -> None:
    assert tokenize("") == []
    assert tokenize("  \n\r ") == []


def test_token_operator_flag() -> None:
    assert Token(TokenKind.AND, "+", 0).is_operator
    assert Token(TokenKind.NOT, "!", 0).is_operator
    assert not Token(TokenKind.OPEN_PAREN, "(", 0).is_operator
    assert not Token(TokenKind.KEYWORD, "A", 0).is_operator
