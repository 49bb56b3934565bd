"""Tests for g2bi configuration."""

import os
from pathlib import Path

import pytest

from g2bi.config import G2biConfig, InstructionsConfig, load_config, write_config_template
from g2bi.errors import ConfigError


def test_defaults():
    """Default config matches the built-in defaults."""
    config = G2biConfig()
    assert config.instructions.max_substep_depth == 3
    assert config.instructions.guide_name == "BuildingGuide1"
    assert config.output.indent is True


def test_load_explicit_file(tmp_path: Path):
    config_path = tmp_path / "custom.toml"
    config_path.write_text('[instructions]\nmax_substep_depth = 1\nguide_name = "Guide"\n')
    config = load_config(config_path)
    assert config.instructions.max_substep_depth == 1
    assert config.instructions.guide_name == "Guide"
    assert config.output.indent is True


def test_load_missing_explicit_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_load_invalid_toml(tmp_path: Path):
    config_path = tmp_path / "bad.toml"
    config_path.write_text("[instructions\n")
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(config_path)


def test_load_invalid_value(tmp_path: Path):
    config_path = tmp_path / "bad.toml"
    config_path.write_text('[instructions]\nmax_substep_depth = "deep"\n')
    with pytest.raises(ConfigError):
        load_config(config_path)


def test_default_file_in_cwd(tmp_path: Path):
    """g2bi.toml in the current directory is picked up automatically."""
    (tmp_path / "g2bi.toml").write_text("[output]\nindent = false\n")
    original = os.getcwd()
    os.chdir(tmp_path)
    try:
        config = load_config()
    finally:
        os.chdir(original)
    assert config.output.indent is False


def test_no_config_file_gives_defaults(tmp_path: Path):
    original = os.getcwd()
    os.chdir(tmp_path)
    try:
        config = load_config()
    finally:
        os.chdir(original)
    assert config == G2biConfig()


def test_write_config_template_round_trips(tmp_path: Path):
    path = write_config_template(tmp_path / "g2bi.toml")
    assert path.exists()
    config = load_config(path)
    assert config.instructions == InstructionsConfig()
    assert "max_substep_depth" in path.read_text()
