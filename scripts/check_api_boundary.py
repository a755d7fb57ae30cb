#!/usr/bin/env python3
"""Keep chordbind.api free of module-level imports from implementation packages.

Factories and thin wrappers may import runtime code lazily inside their body.
"""

from __future__ import annotations

import argparse
import ast
from pathlib import Path

_IMPLEMENTATION_PACKAGES = ("chordbind.runtime", "chordbind.input", "chordbind.window")


def _is_implementation_import(module: str) -> bool:
    return any(module == pkg or module.startswith(f"{pkg}.") for pkg in _IMPLEMENTATION_PACKAGES)


def _check_file(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in tree.body:
        if isinstance(node, ast.Import):
            for alias in node.names:
                if _is_implementation_import(alias.name):
                    violations.append(f"{path}:{node.lineno} module-level import of {alias.name}")
        elif isinstance(node, ast.ImportFrom):
            module = str(node.module or "")
            if _is_implementation_import(module):
                violations.append(f"{path}:{node.lineno} module-level import from {module}")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check API boundary imports.")
    parser.add_argument("--root", default="chordbind/api")
    args = parser.parse_args()

    root = Path(args.root)
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        violations.extend(_check_file(path))

    if violations:
        print("API boundary violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
