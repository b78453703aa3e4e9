"""Tests for diffgate configuration."""

import tomllib
from pathlib import Path

import pytest

from diffgate.config import (
    ConfigError,
    DiffgateConfig,
    get_config_dir,
    load_config,
    write_config_template,
)


def test_defaults():
    """Default config has no extra excludes and lists files."""
    config = DiffgateConfig()
    assert config.diff.exclude == []
    assert config.output.show_files is True


def test_merge_excludes_order():
    """Config excludes come before command-line excludes."""
    config = DiffgateConfig.model_validate({"diff": {"exclude": ["docs"]}})
    assert config.merge_excludes(["*.md"]) == ["docs", "*.md"]
    assert config.merge_excludes(None) == ["docs"]


def test_get_config_dir(tmp_path: Path):
    assert get_config_dir(tmp_path) == tmp_path / ".diffgate"


def test_load_missing_config_returns_defaults(tmp_path: Path):
    """Missing config.toml should yield defaults."""
    assert load_config(tmp_path / ".diffgate") == DiffgateConfig()


def test_load_config_from_file(tmp_path: Path):
    """Values from config.toml should be loaded."""
    config_dir = tmp_path / ".diffgate"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        '[diff]\nexclude = ["dist/*", "vendor"]\n\n[output]\nshow_files = false\n'
    )

    config = load_config(config_dir)

    assert config.diff.exclude == ["dist/*", "vendor"]
    assert config.output.show_files is False


def test_load_partial_config(tmp_path: Path):
    """Sections left out should fall back to defaults."""
    config_dir = tmp_path / ".diffgate"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('[diff]\nexclude = ["vendor"]\n')

    config = load_config(config_dir)

    assert config.diff.exclude == ["vendor"]
    assert config.output.show_files is True


def test_invalid_toml_raises_config_error(tmp_path: Path):
    config_dir = tmp_path / ".diffgate"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("[diff\nexclude = ")

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(config_dir)


def test_invalid_values_raise_config_error(tmp_path: Path):
    config_dir = tmp_path / ".diffgate"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('[diff]\nexclude = "not-a-list"\n')

    with pytest.raises(ConfigError):
        load_config(config_dir)


def test_write_config_template(tmp_path: Path):
    """Template should be valid TOML that loads back to defaults."""
    config_dir = tmp_path / ".diffgate"

    config_path = write_config_template(config_dir)

    assert config_path == config_dir / "config.toml"
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    assert data["diff"]["exclude"] == []
    assert load_config(config_dir) == DiffgateConfig()
