"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotlottie_packager.errors import PackagingError
from dotlottie_packager.schemas import Manifest


@dataclass(frozen=True)
class PackagingResult:
    """Structured packaging outcome.

    Exactly one of ``output_path`` and ``error`` is set.
    """

    output_path: Path | None = None
    manifest: Manifest | None = None
    error: PackagingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output_path is not None

    @classmethod
    def failure(cls, error: PackagingError) -> PackagingResult:
        return cls(error=error)
