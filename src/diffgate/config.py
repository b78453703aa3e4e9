"""Configuration management for diffgate."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_DIR_NAME


class ConfigError(Exception):
    """Config file exists but cannot be used."""

    pass


class DiffConfig(BaseModel):
    """Diff selection settings."""

    exclude: list[str] = Field(
        default_factory=list,
        description="Extra exclude patterns applied before any --exclude options",
    )


class OutputConfig(BaseModel):
    """Console output settings."""

    show_files: bool = Field(default=True, description="List detected files before the diff")


class DiffgateConfig(BaseModel):
    """Root configuration for diffgate."""

    diff: DiffConfig = Field(default_factory=DiffConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def merge_excludes(self, cli_excludes: list[str] | None) -> list[str]:
        """Config excludes followed by command-line excludes."""
        return [*self.diff.exclude, *(cli_excludes or [])]


def get_config_dir(repo_root: Path) -> Path:
    """Return the .diffgate directory for a repository."""
    return repo_root / CONFIG_DIR_NAME


def load_config(config_dir: Path) -> DiffgateConfig:
    """Load config from .diffgate/config.toml.

    Args:
        config_dir: Path to .diffgate directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = config_dir / "config.toml"
    if not config_path.exists():
        return DiffgateConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return DiffgateConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(config_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        config_dir: Path to .diffgate directory

    Returns:
        Path to the written config file
    """
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.toml"
    template = {
        # Lock files are always excluded; list anything else here
        "diff": {"exclude": []},
        "output": {"show_files": True},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
