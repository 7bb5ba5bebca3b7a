"""Manifest encoding, persistence and lookup inside containers."""

from __future__ import annotations

import zipfile
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from dotlottie_packager.errors import InvalidInputError, SerializationError
from dotlottie_packager.resources import write_bytes_atomic
from dotlottie_packager.schemas import Manifest

MANIFEST_FILENAME = "manifest.json"


def serialize_manifest(manifest: Manifest) -> bytes:
    """Encode a manifest as deterministic, indented JSON bytes."""
    try:
        text = manifest.model_dump_json(by_alias=True, indent=2)
    except PydanticSerializationError as exc:
        raise SerializationError(f"Failed to encode manifest: {exc}") from exc
    return (text + "\n").encode("utf-8")


def write_manifest(payload: bytes, manifest_path: Path) -> None:
    """Atomically write encoded manifest bytes to ``manifest_path``."""
    write_bytes_atomic(manifest_path, payload)


def read_manifest(archive_path: Path) -> Manifest:
    """Load the manifest stored at the root of a dotLottie container.

    Raises
    ------
    InvalidInputError
        If the file is not a zip container or holds no valid manifest.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            payload = archive.read(MANIFEST_FILENAME)
    except (OSError, zipfile.BadZipFile, KeyError) as exc:
        raise InvalidInputError(f"Cannot read manifest from {archive_path}: {exc}") from exc
    try:
        return Manifest.model_validate_json(payload)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid manifest in {archive_path}: {exc}") from exc
