#!/usr/bin/env python3
"""Write or verify requirements.txt from the pyproject.toml declarations.

Base dependencies plus the runtime extras are pinned; test tooling stays out.
"""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
RUNTIME_EXTRAS = ("cli", "server")
REQUIREMENTS = ROOT / "requirements.txt"
HEADER = (
    f"# Generated from pyproject.toml (base + extras: {','.join(RUNTIME_EXTRAS)})\n"
    "# Do not edit manually; run: uv run python scripts/requirements_sync.py\n"
    "\n"
)


def declared_requirements() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    extras = project.get("optional-dependencies", {})
    collected = set(project.get("dependencies", []))
    for extra in RUNTIME_EXTRAS:
        collected.update(extras.get(extra, []))
    return sorted(entry.strip() for entry in collected if entry.strip())


def pinned_requirements() -> list[str]:
    if not REQUIREMENTS.exists():
        return []
    lines = REQUIREMENTS.read_text(encoding="utf-8").splitlines()
    entries = (line.split("#", 1)[0].strip() for line in lines)
    return sorted(entry for entry in entries if entry)


def _check() -> None:
    declared, pinned = set(declared_requirements()), set(pinned_requirements())
    if declared == pinned:
        print("requirements.txt is in sync.")
        return
    lines = ["requirements.txt is out of sync with pyproject.toml."]
    lines += [f"+ {entry}" for entry in sorted(declared - pinned)]
    lines += [f"- {entry}" for entry in sorted(pinned - declared)]
    lines.append("Run: uv run python scripts/requirements_sync.py")
    raise SystemExit("\n".join(lines))


def main() -> None:
    """Regenerate requirements.txt, or compare it with ``--check``."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--check", action="store_true", help="Only verify; do not write.")
    if parser.parse_args().check:
        _check()
        return
    entries = declared_requirements()
    REQUIREMENTS.write_text(HEADER + "\n".join(entries) + "\n", encoding="utf-8")
    print(f"Pinned {len(entries)} requirements in {REQUIREMENTS.name}")


if __name__ == "__main__":
    main()
