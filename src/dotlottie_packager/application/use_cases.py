"""Application use-cases orchestrating dotLottie packaging."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from dotlottie_packager.adapters.archivers import ZipArchiver
from dotlottie_packager.adapters.fetchers import ResourceFetcherImpl
from dotlottie_packager.application.layout import DotLottieLayout
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
from dotlottie_packager.errors import (
    ArchiveError,
    DirectoryCreationError,
    FetchError,
    InvalidInputError,
    PackagingError,
    SerializationError,
    WriteError,
)
from dotlottie_packager.infrastructure.manifest_writer import ManifestWriterImpl
from dotlottie_packager.manifest import serialize_manifest
from dotlottie_packager.resources import is_json_resource, resource_base_name
from dotlottie_packager.schemas import (
    AnimationEntry,
    AppearanceRecord,
    Manifest,
    PackagingRequest,
    VariantDescriptor,
)
from dotlottie_packager.types import THEME_ORDER, ProgressCallback, ThemeName

logger = logging.getLogger(__name__)


def build_packaging_options(
    *,
    container_extension: str = "lottie",
    max_workers: int = 4,
    fetch_timeout: float | None = None,
    author: str | None = None,
    generator: str | None = None,
) -> PackagingOptions:
    """Use-case: build typed packaging options."""
    if max_workers < 1:
        raise InvalidInputError("max_workers must be at least 1.")
    extension = container_extension.strip().lstrip(".")
    if not extension:
        raise InvalidInputError("container_extension cannot be empty.")
    defaults = ManifestOptions()
    return PackagingOptions(
        container_extension=extension,
        fetch=FetchOptions(max_workers=max_workers, timeout=fetch_timeout),
        manifest=ManifestOptions(
            author=author or defaults.author,
            generator=generator or defaults.generator,
        ),
    )


def build_packaging_request(
    *,
    primary: str,
    working_directory: Path,
    loop: bool = True,
    theme_color: str = "#ffffff",
    variants: Iterable[VariantDescriptor | Mapping[str, object]] = (),
) -> PackagingRequest:
    """Use-case: validate raw inputs into a packaging request."""
    try:
        return PackagingRequest(
            primary=primary,
            working_directory=working_directory,
            loop=loop,
            theme_color=theme_color,
            variants=tuple(variants),
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid packaging parameters: {exc}") from exc


@dataclass(frozen=True)
class _VariantJob:
    index: int
    descriptor: VariantDescriptor
    file_name: str
    staging_path: Path


def _plan_variant_jobs(
    variants: Sequence[VariantDescriptor],
    animations_dir: Path,
) -> list[_VariantJob]:
    jobs: list[_VariantJob] = []
    for index, descriptor in enumerate(variants):
        if not is_json_resource(descriptor.resource):
            logger.warning(
                "Value for theme %s is not a valid JSON resource: %s",
                descriptor.theme,
                descriptor.resource,
            )
            continue
        file_name = f"{resource_base_name(descriptor.resource)}-{descriptor.theme}"
        jobs.append(
            _VariantJob(
                index=index,
                descriptor=descriptor,
                file_name=file_name,
                staging_path=animations_dir / f".{file_name}.{index}.part",
            )
        )
    return jobs


def _fetch_outcome(job: _VariantJob, future: Future[bool]) -> bool:
    """Return the fetch result, counting a raised exception as a failed fetch."""
    try:
        return bool(future.result())
    except Exception as exc:
        logger.warning(
            "Fetcher raised for %s appearance from %s: %s",
            job.descriptor.theme,
            job.descriptor.resource,
            exc,
        )
        return False


def resolve_appearances(
    *,
    primary_name: str,
    variants: Sequence[VariantDescriptor],
    animations_dir: Path,
    fetcher: ResourceFetcher,
    max_workers: int = 4,
) -> list[AppearanceRecord]:
    """Use-case: materialize variant documents and merge appearance records.

    Every variant is fetched concurrently into its own staging file. After all
    fetches have completed, results are merged in input order on the calling
    thread: the last successful variant of each theme replaces the seeded or
    earlier record and its staging file is renamed into place.

    Returns
    -------
    list[AppearanceRecord]
        One record per theme, ordered ``light``, ``dark``, ``custom``.
    """
    records: dict[ThemeName, AppearanceRecord] = {
        "light": AppearanceRecord(theme="light", animation=primary_name),
    }
    jobs = _plan_variant_jobs(variants, animations_dir)
    if jobs:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="dotlottie-fetch"
        ) as pool:
            futures = [
                pool.submit(fetcher.fetch, job.descriptor.resource, job.staging_path)
                for job in jobs
            ]
        outcomes = [
            _fetch_outcome(job, future) for job, future in zip(jobs, futures, strict=True)
        ]

        winners: dict[ThemeName, _VariantJob] = {}
        for job, fetched in zip(jobs, outcomes, strict=True):
            if fetched:
                winners[job.descriptor.theme] = job
            else:
                logger.warning(
                    "Dropping %s appearance: failed to fetch %s",
                    job.descriptor.theme,
                    job.descriptor.resource,
                )
                job.staging_path.unlink(missing_ok=True)

        for job, fetched in zip(jobs, outcomes, strict=True):
            theme = job.descriptor.theme
            if fetched and winners[theme] is job:
                target = animations_dir / f"{job.file_name}.json"
                try:
                    os.replace(job.staging_path, target)
                except OSError as exc:
                    logger.warning("Dropping %s appearance: %s", theme, exc)
                    job.staging_path.unlink(missing_ok=True)
                    continue
                records[theme] = AppearanceRecord(
                    theme=theme,
                    animation=job.file_name,
                    colors=job.descriptor.colors,
                )
            elif fetched:
                job.staging_path.unlink(missing_ok=True)

    return [records[theme] for theme in THEME_ORDER if theme in records]


def build_manifest(
    *,
    primary_name: str,
    loop: bool,
    theme_color: str,
    appearances: Sequence[AppearanceRecord],
    options: ManifestOptions | None = None,
) -> Manifest:
    """Use-case: assemble the manifest for a single packaged animation."""
    options = options or ManifestOptions()
    try:
        return Manifest(
            animations=[
                AnimationEntry(loop=loop, theme_color=theme_color, speed=1.0, id=primary_name)
            ],
            version=options.version,
            author=options.author,
            generator=options.generator,
            appearance=list(appearances),
        )
    except ValidationError as exc:
        raise SerializationError(f"Invalid manifest content: {exc}") from exc


def _create_directories(layout: DotLottieLayout) -> None:
    """Create the build directories, starting from an empty ``animations/``."""
    try:
        layout.working_directory.mkdir(parents=True, exist_ok=True)
        if layout.animations_dir.is_dir():
            shutil.rmtree(layout.animations_dir)
        layout.animations_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Failed to create {layout.animations_dir}: {exc}"
        ) from exc


def _fetch_primary(
    request: PackagingRequest, layout: DotLottieLayout, fetcher: ResourceFetcher
) -> None:
    if not fetcher.fetch(request.primary, layout.primary_path):
        raise FetchError(f"Failed to fetch primary animation from {request.primary}")


def _create_manifest(
    request: PackagingRequest,
    layout: DotLottieLayout,
    options: PackagingOptions,
    fetcher: ResourceFetcher,
    manifest_writer: ManifestWriter,
) -> Manifest:
    appearances = resolve_appearances(
        primary_name=layout.name,
        variants=request.variants,
        animations_dir=layout.animations_dir,
        fetcher=fetcher,
        max_workers=options.fetch.max_workers,
    )
    manifest = build_manifest(
        primary_name=layout.name,
        loop=request.loop,
        theme_color=request.theme_color,
        appearances=appearances,
        options=options.manifest,
    )
    payload = serialize_manifest(manifest)
    if not manifest_writer.write(payload, layout.manifest_path):
        raise WriteError(f"Failed to write manifest to {layout.manifest_path}")
    return manifest


def _package_archive(
    layout: DotLottieLayout,
    archiver: Archiver,
    progress: ProgressCallback | None,
) -> Path:
    output_path = layout.output_path
    if not archiver.pack(
        [layout.animations_dir, layout.manifest_path],
        output_path,
        progress=progress,
    ):
        raise ArchiveError(f"Failed to create container at {output_path}")
    return output_path


def create_dotlottie(
    request: PackagingRequest,
    *,
    options: PackagingOptions | None = None,
    fetcher: ResourceFetcher | None = None,
    archiver: Archiver | None = None,
    manifest_writer: ManifestWriter | None = None,
    progress: ProgressCallback | None = None,
) -> PackagingResult:
    """Use-case: package a primary animation and its variants into a container.

    Steps run in order and stop at the first fatal failure: validate the
    primary reference, create directories, fetch the primary animation,
    resolve appearances and write the manifest, then build the archive. The
    returned result always reflects the final state of the pipeline.
    """
    options = options or PackagingOptions()
    fetcher = fetcher or ResourceFetcherImpl(timeout=options.fetch.timeout)
    archiver = archiver or ZipArchiver(extension=options.container_extension)
    manifest_writer = manifest_writer or ManifestWriterImpl()

    try:
        if not is_json_resource(request.primary):
            raise InvalidInputError(f"Not a JSON animation: {request.primary}")
        layout = DotLottieLayout(
            working_directory=request.working_directory,
            name=resource_base_name(request.primary),
            container_extension=options.container_extension,
        )
        _create_directories(layout)
        _fetch_primary(request, layout, fetcher)
        manifest = _create_manifest(request, layout, options, fetcher, manifest_writer)
        output_path = _package_archive(layout, archiver, progress)
    except PackagingError as exc:
        logger.error("Failed to create dotLottie file (%s): %s", exc.kind, exc)
        return PackagingResult.failure(exc)

    logger.info("Created dotLottie file at %s", output_path)
    return PackagingResult(output_path=output_path, manifest=manifest)
