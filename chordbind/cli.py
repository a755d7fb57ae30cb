"""Command-line front end for checking and evaluating binding expressions."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from chordbind.api.atoms import ATOM_TYPES, InputAtom, InputCategory
from chordbind.api.errors import ExpressionParseError
from chordbind.api.expression import format_expression
from chordbind.api.parser import create_expression_parser
from chordbind.runtime.catalog import aliases_for, cross_category_aliases
from chordbind.runtime.evaluator import evaluate, referenced_atoms
from chordbind.api.logging import LoggingConfig
from chordbind.runtime.config import resolve_log_level_name
from chordbind.runtime.logging import configure_logging, setup_logging, shutdown_logging
from chordbind.runtime.resolver import resolve_keyword

_LOG = logging.getLogger(__name__)


def _cmd_check(args: argparse.Namespace) -> int:
    parser = create_expression_parser()
    failed = 0
    for expression in args.expressions:
        try:
            tree = parser.parse(expression)
        except ExpressionParseError as exc:
            failed += 1
            print(f"error kind={exc.kind.value} message={exc}")
            continue
        print(format_expression(tree) or "<empty>")
    return 1 if failed else 0


def _cmd_eval(args: argparse.Namespace) -> int:
    try:
        tree = create_expression_parser().parse(args.expression)
    except ExpressionParseError as exc:
        print(f"error kind={exc.kind.value} message={exc}")
        return 1
    active: set[InputAtom] = set()
    for name in args.active:
        node = resolve_keyword(name)
        if node is None:
            print(f"error unknown active input {name!r}")
            return 1
        active |= referenced_atoms(node)
    result = tree is not None and evaluate(tree, active)
    print("true" if result else "false")
    return 0


def _resolve_category(name: str) -> InputCategory | None:
    wanted = name.replace("_", "").replace("-", "").lower()
    for category in InputCategory:
        if category.value.lower() == wanted:
            return category
    return None


def _cmd_aliases(args: argparse.Namespace) -> int:
    categories: tuple[InputCategory, ...] = tuple(InputCategory)
    if args.category is not None:
        category = _resolve_category(args.category)
        if category is None:
            known = ", ".join(item.value for item in InputCategory)
            print(f"error unknown category {args.category!r}; expected one of: {known}")
            return 1
        categories = (category,)
    for category in categories:
        print(f"[{category.value}]")
        for member in ATOM_TYPES[category]:
            print(f"{member.value}: {', '.join(aliases_for(member))}")
    return 0


def _cmd_ambiguities(args: argparse.Namespace) -> int:
    found = cross_category_aliases()
    if not found:
        print("No cross-category aliases.")
        return 0
    for alias, categories in found.items():
        names = ", ".join(category.value for category in categories)
        print(f"{alias}: {names} (resolves to {categories[0].value})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chordbind",
        description="Parse, inspect and evaluate input-binding expressions.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from environment)")
    parser.add_argument("--log-file", default=None, metavar="PATH", help="Also write log records to PATH")
    parser.add_argument(
        "--log-format",
        choices=("json", "text"),
        default="json",
        help="Record format for --log-file (default: json)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Parse expressions and print their canonical form")
    check.add_argument("expressions", nargs="+", metavar="EXPR")
    check.set_defaults(handler=_cmd_check)

    evaluate_cmd = commands.add_parser("eval", help="Evaluate an expression against active inputs")
    evaluate_cmd.add_argument("expression", metavar="EXPR")
    evaluate_cmd.add_argument("--active", nargs="*", default=[], metavar="NAME")
    evaluate_cmd.set_defaults(handler=_cmd_eval)

    aliases = commands.add_parser("aliases", help="List canonical names and their aliases")
    aliases.add_argument("--category", default=None, help="Restrict output to one category")
    aliases.set_defaults(handler=_cmd_aliases)

    ambiguities = commands.add_parser("ambiguities", help="List aliases shared across categories")
    ambiguities.set_defaults(handler=_cmd_ambiguities)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_file:
        configure_logging(
            LoggingConfig(
                level_name=args.log_level or resolve_log_level_name(default="INFO"),
                console_format="text",
                file_path=args.log_file,
                file_format=args.log_format,
            )
        )
    else:
        setup_logging(args.log_level)
    try:
        _LOG.debug("cli_command command=%s", args.command)
        return int(args.handler(args))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
