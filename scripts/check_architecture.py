#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/dotlottie_packager"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    app_dir = PACKAGE / "application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import fastapi",
                "from fastapi",
                "import httpx",
            ],
        )

    for name in ("errors.py", "types.py", "schemas.py", "resources.py", "manifest.py"):
        _assert_no_imports(
            PACKAGE / name,
            ["import typer", "import fastapi", "import httpx", "dotlottie_packager.application"],
        )

    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        ["import fastapi", "from fastapi", "import httpx"],
    )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
