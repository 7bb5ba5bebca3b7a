"""Helpers for resource references: JSON sniffing, locations and file writes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse
from urllib.request import url2pathname

REMOTE_SCHEMES = frozenset({"http", "https"})
JSON_SUFFIX = ".json"


def _reference_path(reference: str) -> PurePosixPath | Path:
    parsed = urlparse(reference)
    if parsed.scheme in REMOTE_SCHEMES or parsed.scheme == "file":
        return PurePosixPath(parsed.path)
    return Path(reference)


def is_remote_resource(reference: str) -> bool:
    """Return ``True`` for ``http``/``https`` references."""
    return urlparse(reference).scheme in REMOTE_SCHEMES


def is_json_resource(reference: str) -> bool:
    """Return ``True`` when the reference names a ``.json`` document.

    Only the path component is inspected, so query strings on remote URLs are
    ignored. Nothing is read from disk or the network.
    """
    if not reference.strip():
        return False
    return _reference_path(reference).suffix.lower() == JSON_SUFFIX


def resource_base_name(reference: str) -> str:
    """Return the file name of a reference without its final extension."""
    return _reference_path(reference).stem


def local_path(reference: str) -> Path:
    """Resolve a local path or ``file://`` URI into a filesystem path."""
    parsed = urlparse(reference)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(reference)


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` so readers never observe a partial file.

    The payload goes to a temporary sibling first and is renamed over ``path``;
    on failure the temporary file is removed and the error re-raised.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
