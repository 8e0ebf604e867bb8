"""Locations of the user and project config files."""

from pathlib import Path
from typing import Optional

CONFIG_DIR = ".kubefn"
CONFIG_FILE = "config.yaml"


def config_file_in(base: Path) -> Path:
    """Config file kept under ``base``: <base>/.kubefn/config.yaml"""
    return base / CONFIG_DIR / CONFIG_FILE


def get_user_config_path() -> Path:
    """User-wide config in the home directory (may not exist)."""
    return config_file_in(Path.home())


def get_project_config_path() -> Optional[Path]:
    """Project config in the working directory, or None when there is none."""
    project_config = config_file_in(Path.cwd())
    return project_config if project_config.is_file() else None
