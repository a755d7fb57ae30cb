"""Keyword resolution against the static alias catalog."""

from __future__ import annotations

from chordbind.api.atoms import InputAtom
from chordbind.api.expression import AtomNode, ExpressionNode, OrNode
from chordbind.runtime.catalog import ALIAS_TABLES, COMPOSITES, aliases_for

_IGNORED_KEYWORD_CHARS = str.maketrans("", "", "_-")


def normalize_keyword(keyword: str) -> str:
    """Drop ASCII underscores and hyphens; case is left for the lookup."""
    return keyword.translate(_IGNORED_KEYWORD_CHARS)


def resolve_atom(keyword: str) -> InputAtom | None:
    """Return the first atom whose alias matches, probing categories in order."""
    name = normalize_keyword(keyword)
    if not name:
        return None
    for table in ALIAS_TABLES:
        found = table.lookup(name)
        if found is not None:
            return found
    return None


def expand_atom(member: InputAtom) -> ExpressionNode:
    """Wrap an atom as a node, expanding composites into their two leaves."""
    leaves = COMPOSITES.get(member)
    if leaves is None:
        return AtomNode(member)
    first, second = leaves
    return OrNode(AtomNode(first), AtomNode(second))


def resolve_keyword(keyword: str) -> ExpressionNode | None:
    """Resolve one keyword token to a node, or ``None`` when nothing matches."""
    found = resolve_atom(keyword)
    if found is None:
        return None
    return expand_atom(found)


def display_name(member: InputAtom) -> str:
    """Return the first name that resolves back to exactly this atom.

    Canonical names win unless an earlier category shadows them, as with
    ``MouseLeft`` which resolves to a click before a movement.
    """
    for name in aliases_for(member):
        if resolve_atom(name) is member:
            return name
    return member.value


__all__ = [
    "display_name",
    "expand_atom",
    "normalize_keyword",
    "resolve_atom",
    "resolve_keyword",
]
