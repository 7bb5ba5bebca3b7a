#!/usr/bin/env python3
"""Example: bundle an animation with dark and custom variants into a .lottie file."""

from __future__ import annotations

import json
import sys
import tempfile
from pathlib import Path

from dotlottie_packager import inspect_dotlottie, package_dotlottie

ANIMATION = {
    "v": "5.7.4",
    "fr": 30,
    "ip": 0,
    "op": 60,
    "w": 120,
    "h": 120,
    "layers": [],
}


def _write_animation(directory: Path, name: str, title: str) -> Path:
    path = directory / name
    path.write_text(json.dumps({**ANIMATION, "nm": title}), encoding="utf-8")
    return path


def _print_progress(fraction: float) -> None:
    print(f"  compressing: {fraction:6.1%}")


def main() -> int:
    with tempfile.TemporaryDirectory(prefix="dotlottie-example-") as tmp:
        workspace = Path(tmp)
        sources = workspace / "sources"
        sources.mkdir()
        primary = _write_animation(sources, "spinner.json", "Spinner")
        dark = _write_animation(sources, "spinner-night.json", "Spinner (night)")
        brand = _write_animation(sources, "spinner-brand.json", "Spinner (brand)")

        print("=" * 60)
        print("Packaging spinner.json with dark and custom variants")
        print("=" * 60)
        result = package_dotlottie(
            str(primary),
            workspace / "build",
            theme_color="#1e1e1e",
            variants=[
                {"theme": "dark", "resource": str(dark)},
                {
                    "theme": "custom",
                    "resource": str(brand),
                    "colors": {"accent": "#ff5a00"},
                },
                {"theme": "dark", "resource": str(sources / "missing.json")},
            ],
            progress=_print_progress,
        )
        if result.error is not None or result.output_path is None:
            print(f"FAIL: {result.error}")
            return 1

        print(f"Saved: {result.output_path} ({result.output_path.stat().st_size} bytes)")
        manifest = inspect_dotlottie(result.output_path)
        for record in manifest.appearance:
            print(f"  {record.theme:<6} -> {record.animation} colors={record.colors}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
