"""Shared packaging-daemon core utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from hashlib import sha256
from pathlib import Path
from tempfile import TemporaryDirectory

from dotlottie_packager.api import package_dotlottie
from dotlottie_packager.types import THEME_ORDER, ColorMap


@dataclass(frozen=True)
class UploadedDocument:
    """Animation document received over a transport."""

    filename: str
    data: bytes


@dataclass(frozen=True)
class PackagedContainer:
    """Container bytes plus integrity metadata."""

    output_bytes: bytes
    output_filename: str
    output_sha256: str
    output_size_bytes: int


def digest_bytes(data: bytes) -> str:
    """Compute SHA-256 digest for byte payload."""
    return sha256(data).hexdigest()


def safe_input_filename(filename: str) -> str:
    """Return a filesystem-safe document filename for temp-dir writes."""
    raw = filename.strip()
    if not raw:
        return "animation.json"
    normalized = raw.replace("\\", "/")
    candidate = Path(normalized).name
    if candidate in {"", ".", ".."}:
        return "animation.json"
    return candidate


def parse_colors(raw: str | None) -> dict[str, dict[str, str]]:
    """Parse a JSON object of ``{theme: {name: color}}`` overrides."""
    if raw is None or not raw.strip():
        return {}
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"colors must be a JSON object: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("colors must be a JSON object keyed by theme")
    parsed: dict[str, dict[str, str]] = {}
    for theme, overrides in loaded.items():
        if theme not in THEME_ORDER:
            raise ValueError(f"unknown theme in colors: {theme}")
        if not isinstance(overrides, dict):
            raise ValueError(f"colors for {theme} must be an object")
        parsed[theme] = {str(name): str(value) for name, value in overrides.items()}
    return parsed


def _write_upload(directory: Path, document: UploadedDocument) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / safe_input_filename(document.filename)
    path.write_bytes(document.data)
    return path


def package_uploaded_documents(
    animation: UploadedDocument,
    variants: Mapping[str, UploadedDocument],
    *,
    loop: bool = True,
    theme_color: str = "#ffffff",
    colors: Mapping[str, ColorMap] | None = None,
) -> PackagedContainer:
    """Package uploaded documents and return the container bytes.

    Raises
    ------
    ValueError
        If packaging fails; the message carries the failing step.
    """
    colors = colors or {}
    with TemporaryDirectory(prefix="dotlottie-") as tmp:
        tmp_dir = Path(tmp)
        primary_path = _write_upload(tmp_dir / "uploads", animation)
        descriptors = [
            {
                "theme": theme,
                "resource": str(_write_upload(tmp_dir / "uploads" / theme, document)),
                "colors": dict(colors[theme]) if theme in colors else None,
            }
            for theme, document in variants.items()
        ]
        result = package_dotlottie(
            str(primary_path),
            tmp_dir / "build",
            loop=loop,
            theme_color=theme_color,
            variants=descriptors,
        )
        if result.error is not None or result.output_path is None:
            kind = result.error.kind if result.error is not None else "packaging_failed"
            raise ValueError(f"{kind}: {result.error}")

        output_bytes = result.output_path.read_bytes()
        return PackagedContainer(
            output_bytes=output_bytes,
            output_filename=result.output_path.name,
            output_sha256=digest_bytes(output_bytes),
            output_size_bytes=len(output_bytes),
        )
