"""On-disk layout of a dotLottie build."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotlottie_packager.manifest import MANIFEST_FILENAME
from dotlottie_packager.resources import JSON_SUFFIX

ANIMATIONS_DIRNAME = "animations"


@dataclass(frozen=True)
class DotLottieLayout:
    """Paths derived from the working directory and primary animation name.

    Parameters
    ----------
    working_directory : Path
        Directory receiving the staging folder and the container.
    name : str
        Base name of the primary animation.
    container_extension : str
        Extension of the output container, without the leading dot.
    """

    working_directory: Path
    name: str
    container_extension: str

    @property
    def root_dir(self) -> Path:
        return self.working_directory / self.name

    @property
    def animations_dir(self) -> Path:
        return self.root_dir / ANIMATIONS_DIRNAME

    @property
    def primary_path(self) -> Path:
        return self.animation_path(self.name)

    @property
    def manifest_path(self) -> Path:
        return self.root_dir / MANIFEST_FILENAME

    @property
    def output_path(self) -> Path:
        return self.working_directory / f"{self.name}.{self.container_extension.lstrip('.')}"

    def animation_path(self, file_name: str) -> Path:
        """Return the path of an animation document by base name."""
        return self.animations_dir / f"{file_name}{JSON_SUFFIX}"
