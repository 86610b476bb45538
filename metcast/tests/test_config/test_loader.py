"""Tests for config loading and dotted-key get."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from metcast.config.loader import get_config_value, load_config
from metcast.config.schema import MetcastConfig
from metcast.models.common import UnitSystem


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.source.base_url == "https://test-met.example.com"
        assert config.query.day == 1
        assert config.query.count == 2
        assert config.output.units == UnitSystem.CUSTOMARY

    def test_unset_sections_default(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.http.timeout_seconds == 30.0
        assert config.logging.level == "WARNING"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == MetcastConfig()

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "absent.yaml") == MetcastConfig()

    def test_none_uses_defaults(self):
        assert load_config(None) == MetcastConfig()

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"query": {"count": 0}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestGetConfigValue:
    def test_nested(self, default_config: MetcastConfig):
        assert get_config_value(default_config, "query.time_range") == "0:4:6"
        assert get_config_value(default_config, "http.timeout_seconds") == 30.0

    def test_section(self, default_config: MetcastConfig):
        assert get_config_value(default_config, "home").is_set is False

    def test_unknown(self, default_config: MetcastConfig):
        with pytest.raises(KeyError, match="Config key not found"):
            get_config_value(default_config, "query.bogus")
