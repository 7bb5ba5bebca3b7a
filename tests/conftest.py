"""Shared pytest configuration, marker assignment and animation fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

LOTTIE_DOCUMENT = {
    "v": "5.7.4",
    "fr": 30,
    "ip": 0,
    "op": 60,
    "w": 100,
    "h": 100,
    "layers": [],
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_animation(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing minimal Lottie documents under ``tmp_path/src``."""

    def _write(name: str, **overrides: object) -> Path:
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({**LOTTIE_DOCUMENT, "nm": path.stem, **overrides}))
        return path

    return _write
