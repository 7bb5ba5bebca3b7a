"""Manifest writer adapter implementation."""

from __future__ import annotations

import logging
from pathlib import Path

from dotlottie_packager.manifest import write_manifest

logger = logging.getLogger(__name__)


class ManifestWriterImpl:
    """Default manifest writer backed by an atomic file replace."""

    def write(self, payload: bytes, manifest_path: Path) -> bool:
        """Write encoded manifest bytes.

        Parameters
        ----------
        payload : bytes
            Serialized manifest document.
        manifest_path : Path
            Final location of ``manifest.json``.

        Returns
        -------
        bool
            ``True`` when the manifest is in place, ``False`` otherwise.
        """
        try:
            write_manifest(payload, manifest_path)
        except OSError as exc:
            logger.error("Failed to write manifest %s: %s", manifest_path, exc)
            return False
        return True
