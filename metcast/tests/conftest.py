"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from metcast.config.schema import MetcastConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_html() -> str:
    return (FIXTURE_DIR / "forecast_page.html").read_text(encoding="utf-8")


@pytest.fixture
def load_json():
    def _load(name: str):
        with open(FIXTURE_DIR / name) as f:
            return json.load(f)
    return _load


@pytest.fixture
def default_config() -> MetcastConfig:
    return MetcastConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "source": {"base_url": "https://test-met.example.com"},
        "query": {"day": 1, "count": 2, "time_range": "6:6:3"},
        "output": {"units": "customary"},
    }
    path = tmp_path / "metcast.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
