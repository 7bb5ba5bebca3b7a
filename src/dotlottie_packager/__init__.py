"""Top-level API for packaging Lottie animations into dotLottie containers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from dotlottie_packager.types import ProgressCallback

if TYPE_CHECKING:
    from dotlottie_packager.application.results import PackagingResult
    from dotlottie_packager.schemas import Manifest, VariantDescriptor

__version__ = "0.1.0"


def package_dotlottie(
    primary: str,
    working_directory: Path,
    *,
    loop: bool = True,
    theme_color: str = "#ffffff",
    variants: Iterable[VariantDescriptor | Mapping[str, object]] = (),
    container_extension: str = "lottie",
    max_workers: int = 4,
    fetch_timeout: float | None = None,
    progress: ProgressCallback | None = None,
) -> PackagingResult:
    """Package a Lottie animation and its themed variants.

    Parameters
    ----------
    primary : str
        Local path, ``file://`` URI or HTTP(S) URL of the main ``.json``
        animation.
    working_directory : Path
        Directory receiving the staging folder and the ``.lottie`` container.
    loop : bool, default=True
        Loop flag written to the manifest.
    theme_color : str, default="#ffffff"
        Hex color written to the manifest.
    variants : Iterable[VariantDescriptor | Mapping], optional
        Light/dark/custom variants. Non-JSON references are skipped.
    container_extension : str, default="lottie"
        Extension of the output container.
    max_workers : int, default=4
        Upper bound on concurrent variant fetches.
    fetch_timeout : float | None, default=None
        Timeout for remote fetches; ``None`` waits indefinitely.
    progress : Callable[[float], None], optional
        Receives the fraction of archive entries written.

    Returns
    -------
    PackagingResult
        ``output_path`` on success, ``error`` on failure.
    """
    from .api import package_dotlottie as _impl

    return _impl(
        primary,
        working_directory,
        loop=loop,
        theme_color=theme_color,
        variants=variants,
        container_extension=container_extension,
        max_workers=max_workers,
        fetch_timeout=fetch_timeout,
        progress=progress,
    )


def create_dotlottie_file(
    primary: str,
    working_directory: Path,
    *,
    loop: bool = True,
    theme_color: str = "#ffffff",
    variants: Iterable[VariantDescriptor | Mapping[str, object]] = (),
    container_extension: str = "lottie",
) -> Path | None:
    """Package a Lottie animation and return the container path.

    Returns
    -------
    Path | None
        ``<working_directory>/<name>.<container_extension>`` on success,
        ``None`` when any fatal step failed (details are logged).
    """
    from .api import create_dotlottie_file as _impl

    return _impl(
        primary,
        working_directory,
        loop=loop,
        theme_color=theme_color,
        variants=variants,
        container_extension=container_extension,
    )


def inspect_dotlottie(archive_path: Path) -> Manifest:
    """Read the manifest of an existing dotLottie container."""
    from .api import inspect_dotlottie as _impl

    return _impl(archive_path)


__all__ = [
    "package_dotlottie",
    "create_dotlottie_file",
    "inspect_dotlottie",
]
