"""Configuration module: resolve cluster connection and listing defaults."""

import os
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from ..client.rest import DEFAULT_API_PATH, DEFAULT_TIMEOUT
from ..presentation.renderer import OutputFormat
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config, get_cluster_config
from .paths import CONFIG_DIR, CONFIG_FILE, get_user_config_path, get_project_config_path

logger = get_logger("config")

ENV_PREFIX = "KUBEFN_"
SETTING_KEYS = ("api_server", "api_path", "namespace", "output", "timeout")


class ClusterSettings(BaseModel):
    """Resolved settings for one listing run."""
    api_server: str = Field(default="http://localhost:8001", description="API server base URL")
    api_path: str = Field(default=DEFAULT_API_PATH, description="API group/version path serving functions")
    namespace: str = Field(default="default", description="Namespace to list")
    output: OutputFormat = Field(default=OutputFormat.TABLE, description="Output format")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    @field_validator("api_server", "namespace")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()


def _env_overrides() -> Dict[str, Any]:
    """Settings taken from KUBEFN_* environment variables."""
    overrides = {}
    for key in SETTING_KEYS:
        value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


def resolve_settings(
    overrides: Optional[Dict[str, Any]] = None,
    config: Optional[Dict[str, Any]] = None
) -> ClusterSettings:
    """
    Resolve settings from defaults, config files, environment and overrides.
    
    Priority (highest first):
    1. overrides (CLI flags); None values are ignored
    2. KUBEFN_* environment variables
    3. project config (.kubefn/config.yaml)
    4. user config (~/.kubefn/config.yaml)
    5. built-in defaults
    
    Raises:
        ConfigError: If a resolved value is invalid
    """
    cluster = get_cluster_config(config)
    unknown = sorted(set(cluster) - set(SETTING_KEYS))
    if unknown:
        logger.warning(f"Ignoring unknown cluster config keys: {unknown}")
    
    values = {key: cluster[key] for key in SETTING_KEYS if cluster.get(key) is not None}
    values.update(_env_overrides())
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    
    try:
        settings = ClusterSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
    
    logger.debug(f"Resolved settings: {settings.model_dump()}")
    return settings


__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "ClusterSettings",
    "resolve_settings",
    "load_config",
    "get_cluster_config",
    "get_user_config_path",
    "get_project_config_path",
]
