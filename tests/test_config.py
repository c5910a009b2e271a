#!/usr/bin/env python3
"""Tests for configuration loading and validation."""

import pytest

from matrixgraph.core.config_spec import EngineConfig, load_config, validate_config
from matrixgraph.core.exceptions import ConfigurationError, MatrixGraphError


class TestEngineConfig:
    """Test the pydantic settings model."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.zero_as_no_edge is True
        assert config.hamiltonian_limit == 12
        assert config.log_level == "info"
        assert config.default_format == "JSON"

    def test_log_level_is_normalized(self):
        assert validate_config({"log_level": "DEBUG"}).log_level == "debug"

    @pytest.mark.parametrize("overrides", [
        {"hamiltonian_limit": 0},
        {"hamiltonian_limit": 13},
        {"log_level": "loud"},
        {"default_format": "YAML"},
        {"unknown_key": 1},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(overrides)
        assert "Configuration validation failed" in str(exc_info.value)

    def test_error_names_the_field(self):
        with pytest.raises(ConfigurationError, match="hamiltonian_limit"):
            validate_config({"hamiltonian_limit": 50})


class TestLoadConfig:
    """Test YAML loading through OmegaConf."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "zero_as_no_edge: false\n"
            "hamiltonian_limit: 8\n"
            "default_format: GraphML\n"
        )
        config = load_config(path)

        assert config.zero_as_no_edge is False
        assert config.hamiltonian_limit == 8
        assert config.default_format == "GraphML"

    def test_environment_interpolation(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MATRIXGRAPH_LIMIT", "7")
        path = tmp_path / "config.yaml"
        path.write_text("hamiltonian_limit: ${oc.env:MATRIXGRAPH_LIMIT,5}\n")
        assert load_config(path).hamiltonian_limit == 7

    def test_extra_keys_are_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("hamiltonian_limit: 6\ncolour: blue\n")
        with pytest.raises(ConfigurationError, match="colour"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: shout\n")
        with pytest.raises(MatrixGraphError):
            load_config(path)
