"""Configuration settings for the IPMA client."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ipmaclient.config.env import EnvConfig
from ipmaclient.config.utils import deep_merge
from ipmaclient.exceptions import ConfigError


DEFAULT_BASE_URL = "https://api.ipma.pt/open-data"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "ipmaclient/0.1.0"

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMATS = ('color', 'json')


@dataclass(frozen=True)
class ClientSettings:
    """Runtime configuration for the client and its logging."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = 'WARNING'
    log_file: str | None = None
    log_format: str = 'color'


def _default_config() -> dict[str, Any]:
    return {
        'api': {
            'base_url': DEFAULT_BASE_URL,
            'timeout': DEFAULT_TIMEOUT,
            'user_agent': DEFAULT_USER_AGENT,
        },
        'logging': {
            'level': 'WARNING',
            'file': None,
            'format': 'color',
        },
    }

def _load_config_file(config_file: str | Path) -> dict[str, Any]:
    """Load configuration from YAML file."""
    path = Path(config_file)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in configuration file: {path}") from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")
    return loaded

def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value!r}")
    return timeout

def _build_settings(config: dict[str, Any]) -> ClientSettings:
    api = config.get('api') or {}
    logging_config = config.get('logging') or {}

    level = str(logging_config.get('level', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {level}", {"allowed": list(LOG_LEVELS)})

    log_format = str(logging_config.get('format', 'color')).lower()
    if log_format not in LOG_FORMATS:
        raise ConfigError(f"Unknown log format: {log_format}", {"allowed": list(LOG_FORMATS)})

    return ClientSettings(
        base_url=str(api.get('base_url', DEFAULT_BASE_URL)).rstrip('/'),
        timeout=_parse_timeout(api.get('timeout', DEFAULT_TIMEOUT)),
        user_agent=str(api.get('user_agent', DEFAULT_USER_AGENT)),
        log_level=level,
        log_file=logging_config.get('file') or None,
        log_format=log_format,
    )

def load_settings(config_file: str | Path | None = None) -> ClientSettings:
    """Load settings from defaults, an optional YAML file and the environment.

    Environment variables take precedence over the file, which takes
    precedence over the defaults.

    Args:
        config_file: Path to YAML file, falls back to ``IPMA_CONFIG_FILE``

    Returns:
        Resolved client settings

    Raises:
        ConfigError: If the file is missing or any value is invalid
    """
    config = _default_config()

    config_file = config_file or EnvConfig.get_config_file()
    if config_file:
        config = deep_merge(config, _load_config_file(config_file))

    EnvConfig.update_config_from_env(config)
    return _build_settings(config)
