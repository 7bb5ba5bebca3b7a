"""Public file-based packaging API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from dotlottie_packager.application.results import PackagingResult
from dotlottie_packager.application.use_cases import (
    build_packaging_options,
    build_packaging_request,
    create_dotlottie,
)
from dotlottie_packager.errors import PackagingError
from dotlottie_packager.manifest import read_manifest
from dotlottie_packager.schemas import Manifest, VariantDescriptor
from dotlottie_packager.types import ProgressCallback


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
    """Package an animation and its variants, returning the structured result.

    Invalid parameters are reported as a failed result rather than raised.
    """
    try:
        request = build_packaging_request(
            primary=primary,
            working_directory=working_directory,
            loop=loop,
            theme_color=theme_color,
            variants=variants,
        )
        options = build_packaging_options(
            container_extension=container_extension,
            max_workers=max_workers,
            fetch_timeout=fetch_timeout,
        )
    except PackagingError as exc:
        return PackagingResult.failure(exc)
    return create_dotlottie(request, options=options, progress=progress)


def create_dotlottie_file(
    primary: str,
    working_directory: Path,
    *,
    loop: bool = True,
    theme_color: str = "#ffffff",
    variants: Iterable[VariantDescriptor | Mapping[str, object]] = (),
    container_extension: str = "lottie",
) -> Path | None:
    """Package an animation and return the container path, or ``None`` on failure."""
    result = package_dotlottie(
        primary,
        working_directory,
        loop=loop,
        theme_color=theme_color,
        variants=variants,
        container_extension=container_extension,
    )
    return result.output_path


def inspect_dotlottie(archive_path: Path) -> Manifest:
    """Return the manifest bundled in an existing container."""
    return read_manifest(archive_path)
