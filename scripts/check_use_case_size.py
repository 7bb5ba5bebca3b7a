#!/usr/bin/env python3
"""Keep packaging use-cases and adapters small enough to read in one sitting."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE = Path(__file__).resolve().parents[1] / "src/dotlottie_packager"
# Limit on statements per function, nested blocks included.
LIMITS = {
    "application/use_cases.py": 30,
    "adapters/archivers.py": 25,
    "adapters/fetchers.py": 25,
}


def _statement_count(function: ast.FunctionDef) -> int:
    return sum(isinstance(node, ast.stmt) for node in ast.walk(function)) - 1


def _oversized(relative: str, limit: int) -> list[str]:
    tree = ast.parse((PACKAGE / relative).read_text(encoding="utf-8"))
    found = []
    for node in ast.walk(tree):
        if isinstance(node, ast.FunctionDef):
            count = _statement_count(node)
            if count > limit:
                found.append(f"{relative}::{node.name} has {count} statements (limit {limit})")
    return found


def main() -> None:
    """Fail when any tracked function outgrows its statement limit."""
    violations = [
        entry for relative, limit in LIMITS.items() for entry in _oversized(relative, limit)
    ]
    if violations:
        raise SystemExit("Functions too large:\n" + "\n".join(f"- {v}" for v in violations))
    print("Use-case size check passed.")


if __name__ == "__main__":
    main()
