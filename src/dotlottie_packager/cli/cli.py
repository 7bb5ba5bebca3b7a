#!/usr/bin/env python3
"""
dotlottie_packager.cli.cli

Typer-based CLI for bundling Lottie animations into dotLottie containers.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Package an animation with a dark variant:

    dotlottie create anim.json --out-dir build --variant dark=anim-dark.json
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from dotlottie_packager.errors import InvalidInputError, PackagingError
from dotlottie_packager.types import THEME_ORDER

app = typer.Typer(
    name="dotlottie",
    help="Bundle Lottie animations and themed variants into .lottie containers.",
    no_args_is_help=True,
)

VARIANT_HELP = "Themed variant THEME=REF (repeatable). THEME is light, dark or custom."
COLOR_HELP = "Variant color override THEME:NAME=HEX (repeatable)."


# -----------------------------
# Parsing utilities
# -----------------------------
def _parse_theme(raw: str, entry: str) -> str:
    theme = raw.strip().lower()
    if theme not in THEME_ORDER:
        raise typer.BadParameter(
            f"Unknown theme '{raw}' in '{entry}'. Use one of: {', '.join(THEME_ORDER)}."
        )
    return theme


def _parse_variants(variant_items: list[str] | None) -> list[tuple[str, str]]:
    """Parse repeated THEME=REF variant entries, keeping their order."""
    parsed: list[tuple[str, str]] = []
    for item in variant_items or []:
        if "=" not in item:
            raise typer.BadParameter(f"Invalid variant entry '{item}'. Use THEME=REF format.")
        theme, reference = item.split("=", 1)
        reference = reference.strip()
        if not reference:
            raise typer.BadParameter(f"Variant reference cannot be empty in '{item}'.")
        parsed.append((_parse_theme(theme, item), reference))
    return parsed


def _parse_colors(color_items: list[str] | None) -> dict[str, dict[str, str]]:
    """Parse repeated THEME:NAME=HEX color overrides grouped by theme."""
    parsed: dict[str, dict[str, str]] = {}
    for item in color_items or []:
        if ":" not in item or "=" not in item:
            raise typer.BadParameter(
                f"Invalid color entry '{item}'. Use THEME:NAME=HEX format."
            )
        theme, assignment = item.split(":", 1)
        name, value = assignment.split("=", 1)
        name = name.strip()
        if not name:
            raise typer.BadParameter("Color name cannot be empty.")
        parsed.setdefault(_parse_theme(theme, item), {})[name] = value.strip()
    return parsed


def _build_variants(
    variant_items: list[str] | None,
    color_items: list[str] | None,
) -> list[dict[str, object]]:
    colors = _parse_colors(color_items)
    variants = _parse_variants(variant_items)
    themes = {theme for theme, _ref in variants}
    orphaned = sorted(set(colors) - themes)
    if orphaned:
        raise typer.BadParameter(
            f"Color overrides given for themes without a variant: {', '.join(orphaned)}."
        )
    return [
        {"theme": theme, "resource": reference, "colors": colors.get(theme)}
        for theme, reference in variants
    ]


def _print_packaging_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly packaging error and return the exit code."""
    label = exc.kind if isinstance(exc, PackagingError) else type(exc).__name__
    typer.echo(f"✗ {label}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Log progress (-v info, -vv debug)."
    ),
) -> None:
    """Initialize shared CLI state and logging."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("create")
def create_cmd(
    ctx: typer.Context,
    primary: str = typer.Argument(
        ..., help="Path or http(s) URL of the main .json animation."
    ),
    out_dir: Path = typer.Option(
        Path("."),
        "--out-dir",
        "-o",
        file_okay=False,
        help="Working directory receiving the staging folder and the container.",
    ),
    loop: bool = typer.Option(True, "--loop/--no-loop", help="Loop flag in the manifest."),
    theme_color: str = typer.Option(
        "#ffffff", "--theme-color", help="Theme color as hex (#RRGGBB)."
    ),
    variant: list[str] | None = typer.Option(None, "--variant", help=VARIANT_HELP),
    color: list[str] | None = typer.Option(None, "--color", help=COLOR_HELP),
    workers: int = typer.Option(
        4, "--workers", min=1, help="Maximum number of concurrent variant fetches."
    ),
    extension: str = typer.Option(
        "lottie", "--extension", help="Container file extension."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.0, help="Timeout in seconds for remote fetches."
    ),
) -> None:
    """Create a dotLottie container from an animation and its variants."""
    debug: bool = bool(ctx.obj.get("debug", False))
    variants = _build_variants(variant, color)

    try:
        from dotlottie_packager.api import package_dotlottie

        result = package_dotlottie(
            primary,
            out_dir,
            loop=loop,
            theme_color=theme_color,
            variants=variants,
            container_extension=extension,
            max_workers=workers,
            fetch_timeout=timeout,
        )
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_packaging_error(exc, debug))

    if result.error is not None:
        raise typer.Exit(code=_print_packaging_error(result.error, debug))
    typer.echo(f"✓ Saved: {result.output_path}")


@app.command("inspect")
def inspect_cmd(
    ctx: typer.Context,
    archive_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Path to a .lottie file."
    ),
) -> None:
    """Print the animations and appearances bundled in a container."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from dotlottie_packager.api import inspect_dotlottie

        manifest = inspect_dotlottie(archive_path)
    except InvalidInputError as exc:
        raise typer.Exit(code=_print_packaging_error(exc, debug))

    typer.echo(f"version: {manifest.version}")
    typer.echo(f"generator: {manifest.generator} ({manifest.author})")
    for animation in manifest.animations:
        typer.echo(
            f"animation: {animation.id} loop={animation.loop} "
            f"themeColor={animation.theme_color} speed={animation.speed}"
        )
    for record in manifest.appearance:
        suffix = f" colors={record.colors}" if record.colors else ""
        typer.echo(f"appearance: {record.theme} -> {record.animation}{suffix}")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed dependency versions."""
    import importlib.metadata as metadata

    from dotlottie_packager import __version__

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"dotlottie-packager: {__version__}")
    for module in ["pydantic", "httpx", "typer", "fastapi", "uvicorn"]:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")


if __name__ == "__main__":
    app()
