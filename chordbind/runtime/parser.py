"""Expression parser wiring tokenizer, shunting-yard and tree builder."""

from __future__ import annotations

import logging

from chordbind.api.errors import ExpressionParseError
from chordbind.api.expression import ExpressionNode
from chordbind.api.parser import ExpressionParser
from chordbind.runtime.config import load_config
from chordbind.runtime.shunting_yard import to_postfix
from chordbind.runtime.tokenizer import tokenize
from chordbind.runtime.tree_builder import build_tree

logger = logging.getLogger(__name__)


class RuntimeExpressionParser(ExpressionParser):
    """Stateless parser; safe to share between threads."""

    def __init__(self, *, trace_enabled: bool | None = None) -> None:
        if trace_enabled is None:
            trace_enabled = load_config().parse_trace_enabled
        self._trace_enabled = bool(trace_enabled)

    def parse(self, expression: str) -> ExpressionNode | None:
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, got {type(expression).__name__}")
        try:
            tokens = tokenize(expression)
            postfix = to_postfix(tokens, expression)
            if self._trace_enabled:
                logger.debug(
                    "expression_postfix expression=%r tokens=%s postfix=%s",
                    expression,
                    " ".join(token.text for token in tokens),
                    " ".join(token.text for token in postfix),
                )
            return build_tree(postfix, expression)
        except ExpressionParseError as exc:
            logger.debug(
                "expression_parse_failed kind=%s fragment=%r position=%s expression=%r",
                exc.kind.value,
                exc.fragment,
                exc.position,
                expression,
            )
            raise


__all__ = ["RuntimeExpressionParser"]
