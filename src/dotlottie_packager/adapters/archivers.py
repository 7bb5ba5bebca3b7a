"""Zip-based container archiver."""

from __future__ import annotations

import logging
import shutil
import threading
import zipfile
from collections.abc import Sequence
from pathlib import Path

from dotlottie_packager.types import ProgressCallback

logger = logging.getLogger(__name__)

UNPACK_FORMAT_PREFIX = "dotlottie"
_REGISTRY_LOCK = threading.Lock()


def _unpack_container(filename: str, extract_dir: str) -> None:
    with zipfile.ZipFile(filename) as archive:
        archive.extractall(extract_dir)


def register_container_extension(extension: str) -> None:
    """Let ``shutil.unpack_archive`` open containers with ``extension``.

    Registration is a no-op when the extension is already known to ``shutil``.
    """
    suffix = f".{extension.lstrip('.')}"
    with _REGISTRY_LOCK:
        known = {
            ext for _name, extensions, _desc in shutil.get_unpack_formats() for ext in extensions
        }
        if suffix in known:
            return
        shutil.register_unpack_format(
            f"{UNPACK_FORMAT_PREFIX}{suffix}",
            [suffix],
            _unpack_container,
            description=f"dotLottie container ({suffix})",
        )


def _collect_entries(paths: Sequence[Path]) -> list[tuple[Path, str]]:
    """Return ``(source, arcname)`` pairs rooted at each path's own name."""
    entries: list[tuple[Path, str]] = []
    for path in paths:
        if path.is_dir():
            entries.append((path, f"{path.name}/"))
            for child in sorted(path.rglob("*")):
                arcname = child.relative_to(path.parent).as_posix()
                entries.append((child, f"{arcname}/" if child.is_dir() else arcname))
        elif path.is_file():
            entries.append((path, path.name))
        else:
            raise FileNotFoundError(f"Cannot archive missing path: {path}")
    return entries


class ZipArchiver:
    """Write containers as deflate-compressed zip archives.

    Parameters
    ----------
    extension : str, default="lottie"
        Container extension registered for unpacking.
    compresslevel : int | None, default=None
        Deflate level; ``None`` keeps the zlib default.
    """

    def __init__(self, extension: str = "lottie", compresslevel: int | None = None) -> None:
        self.extension = extension.lstrip(".")
        self.compresslevel = compresslevel

    def pack(
        self,
        paths: Sequence[Path],
        output_path: Path,
        progress: ProgressCallback | None = None,
    ) -> bool:
        """Archive ``paths`` into ``output_path``.

        The archive is assembled next to the target and renamed into place,
        so a failed run never leaves a file at ``output_path``.
        """
        register_container_extension(self.extension)
        partial_path = output_path.with_name(f"{output_path.name}.part")
        try:
            entries = _collect_entries(paths)
            total = len(entries)
            with zipfile.ZipFile(
                partial_path,
                mode="w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=self.compresslevel,
            ) as archive:
                for done, (source, arcname) in enumerate(entries, start=1):
                    archive.write(source, arcname)
                    fraction = done / total
                    logger.debug("Compressing dotLottie file: %.2f", fraction)
                    if progress is not None:
                        progress(fraction)
            partial_path.replace(output_path)
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, ValueError) as exc:
            logger.error("Failed to create archive %s: %s", output_path, exc)
            partial_path.unlink(missing_ok=True)
            return False
        return True
