"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from dotlottie_packager.types import ProgressCallback


class ResourceFetcher(Protocol):
    """Materialize a local or remote resource at a local path."""

    def fetch(self, source: str, destination: Path) -> bool:
        """Copy or download ``source`` into ``destination``.

        Returns ``False`` on any failure; never raises.
        """


class ManifestWriter(Protocol):
    """Persist encoded manifest bytes."""

    def write(self, payload: bytes, manifest_path: Path) -> bool:
        """Write the manifest atomically; ``False`` on failure."""


class Archiver(Protocol):
    """Bundle directories and files into a container archive."""

    def pack(
        self,
        paths: Sequence[Path],
        output_path: Path,
        progress: ProgressCallback | None = None,
    ) -> bool:
        """Write the archive at ``output_path``; ``False`` on failure."""
