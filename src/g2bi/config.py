"""Configuration management for g2bi."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import DEFAULT_CONFIG_FILENAME, DEFAULT_GUIDE_NAME, DEFAULT_MAX_SUBSTEP_DEPTH
from .errors import ConfigError


class InstructionsConfig(BaseModel):
    """Configuration for step generation."""

    max_substep_depth: int = Field(
        default=DEFAULT_MAX_SUBSTEP_DEPTH, description="Maximum depth of sub-steps to generate"
    )
    guide_name: str = Field(
        default=DEFAULT_GUIDE_NAME, description="Name of the generated BuildingInstruction"
    )


class OutputConfig(BaseModel):
    """Configuration for writing documents."""

    indent: bool = True  # Pretty-print the written LXFML


class G2biConfig(BaseModel):
    """Root configuration for g2bi."""

    instructions: InstructionsConfig = Field(default_factory=InstructionsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: Path | None = None) -> G2biConfig:
    """Load config from a TOML file.

    Args:
        config_path: Explicit config file. When None, ``g2bi.toml`` in the
            current directory is used if it exists.

    Returns:
        Loaded configuration, or defaults if no config file is found

    Raises:
        ConfigError: If an explicit path is missing or the file is invalid
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not config_path.exists():
            return G2biConfig()
    elif not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return G2biConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def write_config_template(config_path: Path) -> Path:
    """Write default config template.

    Args:
        config_path: Destination file

    Returns:
        Path to the written config file
    """
    template = {
        "instructions": {
            "max_substep_depth": DEFAULT_MAX_SUBSTEP_DEPTH,
            "guide_name": DEFAULT_GUIDE_NAME,
        },
        "output": {"indent": True},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
