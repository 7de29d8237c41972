"""Shared test fixtures."""

from pathlib import Path

import pytest
from flatwiki.config import Config, ServerConfig, WikiConfig


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a data directory holding two pages."""
    data = tmp_path / "data"
    data.mkdir(exist_ok=True)
    (data / "example.md").write_bytes(b"content\n")
    (data / "other_example.md").write_bytes(b"other content\n")
    return data


@pytest.fixture
def test_config(data_dir: Path) -> Config:
    """Create a test configuration using the bundled templates."""
    return Config(
        server=ServerConfig(),
        wiki=WikiConfig(data_dir=data_dir),
    )
