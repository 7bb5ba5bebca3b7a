"""Typed option objects shared across packaging use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from dotlottie_packager import __version__

DEFAULT_AUTHOR = "LottieFiles"
DEFAULT_GENERATOR = f"dotlottie-packager {__version__}"
MANIFEST_VERSION = "1.0"
CONTAINER_EXTENSION = "lottie"


@dataclass(frozen=True)
class FetchOptions:
    """Variant fetch fan-out configuration.

    ``timeout`` of ``None`` leaves remote fetches unbounded.
    """

    max_workers: int = 4
    timeout: float | None = None


@dataclass(frozen=True)
class ManifestOptions:
    """Constants identifying the tool inside ``manifest.json``."""

    version: str = MANIFEST_VERSION
    author: str = DEFAULT_AUTHOR
    generator: str = DEFAULT_GENERATOR


@dataclass(frozen=True)
class PackagingOptions:
    """Shared packaging options passed through use-cases."""

    container_extension: str = CONTAINER_EXTENSION
    fetch: FetchOptions = FetchOptions()
    manifest: ManifestOptions = ManifestOptions()
