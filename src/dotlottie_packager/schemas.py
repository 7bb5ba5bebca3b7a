"""Pydantic schemas for packaging requests and the dotLottie manifest."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dotlottie_packager.types import ThemeName

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _validate_hex_color(value: str) -> str:
    cleaned = value.strip()
    if not _HEX_COLOR.match(cleaned):
        raise ValueError(f"'{value}' is not a hex color (#RGB, #RRGGBB or #RRGGBBAA).")
    return cleaned


class VariantDescriptor(BaseModel):
    """Caller-supplied themed variant of the primary animation.

    ``resource`` is not checked here: a reference that is not a JSON document
    is dropped during appearance resolution instead of failing the request.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    theme: ThemeName
    resource: str = Field(min_length=1)
    colors: dict[str, str] | None = None


class PackagingRequest(BaseModel):
    """Validated input for a single dotLottie packaging run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    primary: str = Field(min_length=1)
    working_directory: Path
    loop: bool = True
    theme_color: str = "#ffffff"
    variants: tuple[VariantDescriptor, ...] = ()

    @field_validator("theme_color")
    @classmethod
    def _validate_theme_color(cls, value: str) -> str:
        return _validate_hex_color(value)


class AnimationEntry(BaseModel):
    """Manifest entry describing the packaged animation."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    loop: bool
    theme_color: str = Field(alias="themeColor")
    speed: float = 1.0
    id: str


class AppearanceRecord(BaseModel):
    """Resolved appearance pointing at a file under ``animations/``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    theme: ThemeName
    animation: str
    colors: dict[str, str] | None = None


class Manifest(BaseModel):
    """Metadata document stored as ``manifest.json`` inside the container."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    animations: list[AnimationEntry] = Field(min_length=1)
    version: str
    author: str
    generator: str
    appearance: list[AppearanceRecord]
