"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from dotlottie_packager.application.options import (
    FetchOptions,
    ManifestOptions,
    PackagingOptions,
)
from dotlottie_packager.application.ports import (
    Archiver,
    ManifestWriter,
    ResourceFetcher,
)
from dotlottie_packager.application.results import PackagingResult
from dotlottie_packager.schemas import (
    AppearanceRecord,
    PackagingRequest,
    VariantDescriptor,
)
from dotlottie_packager.types import ProgressCallback


def build_packaging_options(
    *,
    container_extension: str = "lottie",
    max_workers: int = 4,
    fetch_timeout: float | None = None,
    author: str | None = None,
    generator: str | None = None,
) -> PackagingOptions:
    """Build typed packaging options via lazy use-case import."""
    from dotlottie_packager.application.use_cases import build_packaging_options as _impl

    return _impl(
        container_extension=container_extension,
        max_workers=max_workers,
        fetch_timeout=fetch_timeout,
        author=author,
        generator=generator,
    )


def build_packaging_request(
    *,
    primary: str,
    working_directory: Path,
    loop: bool = True,
    theme_color: str = "#ffffff",
    variants: Iterable[VariantDescriptor | Mapping[str, object]] = (),
) -> PackagingRequest:
    """Validate a packaging request via lazy use-case import."""
    from dotlottie_packager.application.use_cases import build_packaging_request as _impl

    return _impl(
        primary=primary,
        working_directory=working_directory,
        loop=loop,
        theme_color=theme_color,
        variants=variants,
    )


def resolve_appearances(
    *,
    primary_name: str,
    variants: Sequence[VariantDescriptor],
    animations_dir: Path,
    fetcher: ResourceFetcher,
    max_workers: int = 4,
) -> list[AppearanceRecord]:
    """Resolve appearance records via lazy use-case import."""
    from dotlottie_packager.application.use_cases import resolve_appearances as _impl

    return _impl(
        primary_name=primary_name,
        variants=variants,
        animations_dir=animations_dir,
        fetcher=fetcher,
        max_workers=max_workers,
    )


def create_dotlottie(
    request: PackagingRequest,
    *,
    options: PackagingOptions | None = None,
    fetcher: ResourceFetcher | None = None,
    archiver: Archiver | None = None,
    manifest_writer: ManifestWriter | None = None,
    progress: ProgressCallback | None = None,
) -> PackagingResult:
    """Package a dotLottie container via lazy use-case import."""
    from dotlottie_packager.application.use_cases import create_dotlottie as _impl

    return _impl(
        request,
        options=options,
        fetcher=fetcher,
        archiver=archiver,
        manifest_writer=manifest_writer,
        progress=progress,
    )


__all__ = [
    "FetchOptions",
    "ManifestOptions",
    "PackagingOptions",
    "PackagingResult",
    "build_packaging_options",
    "build_packaging_request",
    "resolve_appearances",
    "create_dotlottie",
]
