"""Chordbind runtime modules."""

from chordbind.runtime.bindings import RuntimeActionBindings
from chordbind.runtime.catalog import ALIAS_TABLES, COMPOSITES, AliasTable, cross_category_aliases
from chordbind.runtime.config import ChordbindConfig, load_config
from chordbind.runtime.logging import setup_logging
from chordbind.runtime.parser import RuntimeExpressionParser
from chordbind.runtime.resolver import display_name, resolve_atom, resolve_keyword

__all__ = [
    "ALIAS_TABLES",
    "AliasTable",
    "COMPOSITES",
    "ChordbindConfig",
    "RuntimeActionBindings",
    "RuntimeExpressionParser",
    "cross_category_aliases",
    "display_name",
    "load_config",
    "resolve_atom",
    "resolve_keyword",
    "setup_logging",
]
