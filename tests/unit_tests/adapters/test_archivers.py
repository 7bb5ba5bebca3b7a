"""Unit tests for the zip container archiver."""

from __future__ import annotations

import shutil
import zipfile
from pathlib import Path

import pytest

from dotlottie_packager.adapters.archivers import ZipArchiver, register_container_extension


@pytest.fixture
def staged(tmp_path: Path) -> tuple[Path, Path]:
    root = tmp_path / "anim"
    animations = root / "animations"
    animations.mkdir(parents=True)
    (animations / "anim.json").write_text('{"nm": "anim"}')
    (animations / "dark-dark.json").write_text('{"nm": "dark"}')
    manifest = root / "manifest.json"
    manifest.write_text('{"version": "1.0"}')
    return animations, manifest


def test_pack_layout(tmp_path: Path, staged: tuple[Path, Path]) -> None:
    """Place the animations directory and manifest at the archive root."""
    output = tmp_path / "anim.lottie"

    assert ZipArchiver().pack(list(staged), output) is True

    with zipfile.ZipFile(output) as archive:
        names = archive.namelist()
        assert names == [
            "animations/",
            "animations/anim.json",
            "animations/dark-dark.json",
            "manifest.json",
        ]
        assert archive.read("animations/dark-dark.json") == b'{"nm": "dark"}'
        assert archive.getinfo("manifest.json").compress_type == zipfile.ZIP_DEFLATED
    assert not (tmp_path / "anim.lottie.part").exists()


def test_pack_reports_progress(tmp_path: Path, staged: tuple[Path, Path]) -> None:
    """Report monotonically increasing fractions ending at 1.0."""
    fractions: list[float] = []

    assert ZipArchiver().pack(list(staged), tmp_path / "anim.lottie", progress=fractions.append)

    assert len(fractions) == 4
    assert fractions == sorted(fractions)
    assert fractions[-1] == pytest.approx(1.0)
    assert all(0.0 < value <= 1.0 for value in fractions)


def test_pack_missing_path_leaves_no_output(tmp_path: Path, staged: tuple[Path, Path]) -> None:
    """Fail without leaving a partial or final archive behind."""
    animations, _manifest = staged
    output = tmp_path / "anim.lottie"

    assert ZipArchiver().pack([animations, tmp_path / "missing.json"], output) is False
    assert not output.exists()
    assert not (tmp_path / "anim.lottie.part").exists()


def test_pack_keeps_previous_container_on_failure(
    tmp_path: Path, staged: tuple[Path, Path]
) -> None:
    """Leave an existing container untouched when a rebuild fails."""
    output = tmp_path / "anim.lottie"
    assert ZipArchiver().pack(list(staged), output)
    before = output.read_bytes()

    assert ZipArchiver().pack([tmp_path / "missing"], output) is False
    assert output.read_bytes() == before


def test_custom_extension_is_unpackable(tmp_path: Path, staged: tuple[Path, Path]) -> None:
    """Register the container extension with shutil's unpack formats."""
    output = tmp_path / "anim.dlottie"
    assert ZipArchiver(extension="dlottie").pack(list(staged), output)

    extract_dir = tmp_path / "extracted"
    shutil.unpack_archive(output, extract_dir)

    assert (extract_dir / "manifest.json").read_text() == '{"version": "1.0"}'
    assert (extract_dir / "animations" / "anim.json").exists()


def test_register_container_extension_is_idempotent() -> None:
    """Registering the same extension twice is harmless."""
    register_container_extension("lottie")
    register_container_extension(".lottie")

    owners = [
        name for name, extensions, _desc in shutil.get_unpack_formats() if ".lottie" in extensions
    ]
    assert len(owners) == 1
