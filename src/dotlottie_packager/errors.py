"""Error hierarchy for dotLottie packaging failures."""

from __future__ import annotations

from dotlottie_packager.types import ErrorKind


class PackagingError(Exception):
    """Base class for fatal packaging failures.

    Attributes
    ----------
    kind : str
        Stable identifier of the failing pipeline step.
    exit_code : int
        Process exit code used by the CLI.
    """

    kind: ErrorKind = "packaging_failed"
    exit_code: int = 1


class InvalidInputError(PackagingError):
    """Request is malformed or the primary resource is not JSON."""

    kind: ErrorKind = "invalid_input"
    exit_code = 2


class DirectoryCreationError(PackagingError):
    """Working or animations directory could not be created."""

    kind: ErrorKind = "directory_creation_failed"


class FetchError(PackagingError):
    """Primary animation could not be materialized."""

    kind: ErrorKind = "fetch_failed"


class SerializationError(PackagingError):
    """Manifest could not be encoded."""

    kind: ErrorKind = "serialization_failed"


class WriteError(PackagingError):
    """Manifest could not be written to disk."""

    kind: ErrorKind = "write_failed"


class ArchiveError(PackagingError):
    """Container archive could not be produced."""

    kind: ErrorKind = "archive_failed"
