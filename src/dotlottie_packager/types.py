"""Shared type aliases for packaging modules."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Literal, TypeAlias

ThemeName: TypeAlias = Literal["light", "dark", "custom"]

THEME_ORDER: tuple[ThemeName, ...] = ("light", "dark", "custom")

ColorMap: TypeAlias = Mapping[str, str]

ProgressCallback: TypeAlias = Callable[[float], None]

ErrorKind: TypeAlias = Literal[
    "packaging_failed",
    "invalid_input",
    "directory_creation_failed",
    "fetch_failed",
    "serialization_failed",
    "write_failed",
    "archive_failed",
]
