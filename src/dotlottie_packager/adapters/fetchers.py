"""Resource fetcher adapter for local copies and HTTP downloads."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from dotlottie_packager.resources import is_remote_resource, local_path, write_bytes_atomic

logger = logging.getLogger(__name__)


class ResourceFetcherImpl:
    """Default fetcher: copies local files and downloads remote ones.

    Parameters
    ----------
    timeout : float | None, default=None
        Timeout in seconds for remote requests; ``None`` disables it.
    transport : httpx.BaseTransport | None, default=None
        Custom httpx transport, mainly for tests.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def fetch(self, source: str, destination: Path) -> bool:
        """Materialize ``source`` at ``destination``.

        Returns
        -------
        bool
            ``True`` once the destination holds the full payload. Any failure
            is logged and reported as ``False``; the destination is left
            untouched.
        """
        if not destination.parent.is_dir():
            logger.warning("Destination directory does not exist: %s", destination.parent)
            return False

        try:
            if is_remote_resource(source):
                payload = self._download(source)
            else:
                payload = local_path(source).read_bytes()
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # InvalidURL and IDNA failures are not HTTPError subclasses.
            logger.warning("Failed to download data from %s: %s", source, exc)
            return False
        except OSError as exc:
            logger.warning("Failed to read %s: %s", source, exc)
            return False

        if not payload:
            logger.warning("Resource %s is empty", source)
            return False

        try:
            write_bytes_atomic(destination, payload)
        except OSError as exc:
            logger.warning("Failed to save data to %s: %s", destination, exc)
            return False
        return True

    def _download(self, url: str) -> bytes:
        logger.info("Downloading from url: %s", url)
        with httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content
