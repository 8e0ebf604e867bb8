"""Two-tier configuration manager (user + project override)."""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .paths import get_user_config_path, get_project_config_path
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def load_config() -> Dict[str, Any]:
    """
    Load full config tree with project override.
    
    Returns:
        Configuration dictionary (project config overrides user config)
    """
    config = _read_yaml(get_user_config_path())
    
    project_config_path = get_project_config_path()
    if project_config_path:
        _deep_merge(config, _read_yaml(project_config_path))
        logger.info(f"Loaded project config from {project_config_path}")
    
    return config


def get_cluster_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return cluster subsection from loaded config.
    
    Args:
        config: Optional config dict (if None, loads from file)
        
    Returns:
        Cluster configuration dictionary
    """
    if config is None:
        config = load_config()
    
    cluster = config.get("cluster") or {}
    if not isinstance(cluster, dict):
        logger.warning("Ignoring 'cluster' config section: not a mapping")
        return {}
    return cluster


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping, returning {} when missing or unreadable."""
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: top level is not a mapping")
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
