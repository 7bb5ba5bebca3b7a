"""Unit tests for the resource fetcher adapter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from dotlottie_packager.adapters.fetchers import ResourceFetcherImpl
from dotlottie_packager.api import package_dotlottie


def _transport(status_code: int = 200, content: bytes = b'{"v": "5.7.4"}') -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content)

    return httpx.MockTransport(handler)


def test_local_copy(tmp_path: Path) -> None:
    """Copy local documents byte for byte."""
    source = tmp_path / "anim.json"
    source.write_bytes(b'{"layers": []}')
    destination = tmp_path / "out.json"

    assert ResourceFetcherImpl().fetch(str(source), destination) is True
    assert destination.read_bytes() == b'{"layers": []}'


def test_local_copy_from_file_uri(tmp_path: Path) -> None:
    """Accept file:// URIs for local documents."""
    source = tmp_path / "anim.json"
    source.write_bytes(b"{}")
    destination = tmp_path / "out.json"

    assert ResourceFetcherImpl().fetch(source.as_uri(), destination) is True
    assert destination.read_bytes() == b"{}"


def test_missing_destination_directory_fails(tmp_path: Path) -> None:
    """Never create parent directories on behalf of the caller."""
    source = tmp_path / "anim.json"
    source.write_bytes(b"{}")

    assert ResourceFetcherImpl().fetch(str(source), tmp_path / "nope" / "out.json") is False
    assert not (tmp_path / "nope").exists()


def test_missing_local_source_fails(tmp_path: Path) -> None:
    """Report missing sources as failure instead of raising."""
    destination = tmp_path / "out.json"
    assert ResourceFetcherImpl().fetch(str(tmp_path / "absent.json"), destination) is False
    assert not destination.exists()


def test_empty_local_source_fails(tmp_path: Path) -> None:
    """Treat empty payloads as failed fetches and keep the destination untouched."""
    source = tmp_path / "empty.json"
    source.write_bytes(b"")
    destination = tmp_path / "out.json"
    destination.write_bytes(b"previous")

    assert ResourceFetcherImpl().fetch(str(source), destination) is False
    assert destination.read_bytes() == b"previous"


def test_remote_download(tmp_path: Path) -> None:
    """Write the response body of a successful GET."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'{"nm": "remote"}')

    fetcher = ResourceFetcherImpl(transport=httpx.MockTransport(handler))
    destination = tmp_path / "remote.json"

    assert fetcher.fetch("https://cdn.example.com/remote.json", destination) is True
    assert destination.read_bytes() == b'{"nm": "remote"}'
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert "authorization" not in seen[0].headers


@pytest.mark.parametrize("status_code", [404, 500])
def test_remote_http_error_fails(tmp_path: Path, status_code: int) -> None:
    """Report non-2xx responses as failure."""
    fetcher = ResourceFetcherImpl(transport=_transport(status_code=status_code))
    destination = tmp_path / "remote.json"

    assert fetcher.fetch("https://cdn.example.com/remote.json", destination) is False
    assert not destination.exists()


def test_remote_empty_body_fails(tmp_path: Path) -> None:
    """Report empty response bodies as failure."""
    fetcher = ResourceFetcherImpl(transport=_transport(content=b""))
    assert fetcher.fetch("https://cdn.example.com/remote.json", tmp_path / "r.json") is False


def test_remote_transport_error_fails(tmp_path: Path) -> None:
    """Swallow transport errors into a failed fetch."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = ResourceFetcherImpl(transport=httpx.MockTransport(handler))
    assert fetcher.fetch("https://cdn.example.com/remote.json", tmp_path / "r.json") is False


@pytest.mark.parametrize(
    "url",
    [
        "https://cdn.example.com:abc/x.json",
        "https://xn--a.com/x.json",
    ],
)
def test_unparseable_remote_url_fails(tmp_path: Path, url: str) -> None:
    """Report URLs httpx cannot parse or encode as failed fetches."""
    fetcher = ResourceFetcherImpl(transport=_transport())
    destination = tmp_path / "r.json"

    assert fetcher.fetch(url, destination) is False
    assert not destination.exists()


def test_unparseable_variant_url_is_dropped_from_package(
    tmp_path: Path, write_animation: Callable[..., Path]
) -> None:
    """Package the primary alone when a variant URL cannot be parsed."""
    primary = write_animation("anim.json")
    out_dir = tmp_path / "out"

    result = package_dotlottie(
        str(primary),
        out_dir,
        variants=[{"theme": "dark", "resource": "https://cdn.example.com:abc/x.json"}],
    )

    assert result.ok, result.error
    assert result.manifest is not None
    assert [record.theme for record in result.manifest.appearance] == ["light"]
    assert sorted(p.name for p in (out_dir / "anim" / "animations").iterdir()) == ["anim.json"]
