"""Public chordbind API contracts."""

from chordbind.api.atoms import (
    InputAtom,
    InputCategory,
    KeyboardInput,
    MouseClickInput,
    MouseDragInput,
    MouseMovementInput,
    MouseWheelInput,
    is_input_atom,
)
from chordbind.api.bindings import ActionBindings, create_action_bindings
from chordbind.api.errors import (
    CatalogError,
    ExpressionParseError,
    InvalidKeywordError,
    MalformedExpressionError,
    ParseErrorKind,
    UnclosedOpeningParenthesisError,
    UnexpectedOperatorError,
    UnopenedClosingParenthesisError,
)
from chordbind.api.expression import (
    AndNode,
    AtomNode,
    ExpressionNode,
    NotNode,
    OrNode,
    and_,
    atom,
    evaluate,
    fold_expression,
    format_expression,
    not_,
    or_,
    referenced_atoms,
)
from chordbind.api.input_events import KeyEvent, PointerEvent, WheelEvent
from chordbind.api.input_snapshot import ActionSnapshot, ChordSnapshot, create_empty_chord_snapshot
from chordbind.api.logging import LoggingConfig, configure_logging
from chordbind.api.parser import ExpressionParser, create_expression_parser, parse_expression

__all__ = [
    "ActionBindings",
    "ActionSnapshot",
    "AndNode",
    "AtomNode",
    "CatalogError",
    "ChordSnapshot",
    "ExpressionNode",
    "ExpressionParseError",
    "ExpressionParser",
    "InputAtom",
    "InputCategory",
    "InvalidKeywordError",
    "KeyEvent",
    "KeyboardInput",
    "LoggingConfig",
    "MalformedExpressionError",
    "MouseClickInput",
    "MouseDragInput",
    "MouseMovementInput",
    "MouseWheelInput",
    "NotNode",
    "OrNode",
    "ParseErrorKind",
    "PointerEvent",
    "UnclosedOpeningParenthesisError",
    "UnexpectedOperatorError",
    "UnopenedClosingParenthesisError",
    "WheelEvent",
    "and_",
    "atom",
    "configure_logging",
    "create_action_bindings",
    "create_empty_chord_snapshot",
    "create_expression_parser",
    "evaluate",
    "fold_expression",
    "format_expression",
    "is_input_atom",
    "not_",
    "or_",
    "parse_expression",
    "referenced_atoms",
]
