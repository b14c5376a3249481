"""Shared fixtures for tide-config tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest


@pytest.fixture
def config_dir():
    """Temporary directory for .tide files."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_config(config_dir):
    """Write a .tide file relative to config_dir and return its path."""

    def _write(name: str, content: str) -> Path:
        path = config_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
