"""Unit tests for request and manifest schemas."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dotlottie_packager.schemas import (
    AnimationEntry,
    PackagingRequest,
    VariantDescriptor,
)


@pytest.mark.parametrize("color", ["#fff", "#112233", "#112233ff", " #ABCDEF "])
def test_request_accepts_hex_theme_colors(color: str, tmp_path: Path) -> None:
    """Accept short, long and alpha hex colors."""
    request = PackagingRequest(primary="anim.json", working_directory=tmp_path, theme_color=color)
    assert request.theme_color == color.strip()


@pytest.mark.parametrize("color", ["white", "#12345", "112233", "#gggggg"])
def test_request_rejects_non_hex_theme_colors(color: str, tmp_path: Path) -> None:
    """Reject colors that are not hex strings."""
    with pytest.raises(ValidationError, match="hex color"):
        PackagingRequest(primary="anim.json", working_directory=tmp_path, theme_color=color)


def test_request_coerces_variant_mappings(tmp_path: Path) -> None:
    """Build variant descriptors from plain mappings, keeping order."""
    request = PackagingRequest(
        primary="anim.json",
        working_directory=tmp_path,
        variants=[
            {"theme": "dark", "resource": "dark.json", "colors": {"bg": "#000000"}},
            {"theme": "custom", "resource": "brand.json"},
        ],
    )
    assert [v.theme for v in request.variants] == ["dark", "custom"]
    assert request.variants[0].colors == {"bg": "#000000"}
    assert request.variants[1].colors is None


def test_variant_rejects_unknown_theme() -> None:
    """Only light, dark and custom themes are valid."""
    with pytest.raises(ValidationError):
        VariantDescriptor(theme="sepia", resource="sepia.json")


def test_variant_accepts_non_json_reference() -> None:
    """Non-JSON references are dropped later, not rejected here."""
    assert VariantDescriptor(theme="dark", resource="dark.png").resource == "dark.png"


def test_request_is_immutable(tmp_path: Path) -> None:
    """Requests are frozen once validated."""
    request = PackagingRequest(primary="anim.json", working_directory=tmp_path)
    with pytest.raises(ValidationError):
        request.loop = False


def test_animation_entry_uses_camel_case_alias() -> None:
    """Dump ``theme_color`` as ``themeColor`` and accept both spellings."""
    entry = AnimationEntry(loop=True, theme_color="#ffffff", id="anim")
    assert entry.model_dump(by_alias=True)["themeColor"] == "#ffffff"
    entry = AnimationEntry.model_validate({"loop": False, "themeColor": "#000", "id": "x"})
    assert entry.speed == 1.0
