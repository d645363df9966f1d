"""Environment variable handling for configuration."""

import os
from typing import Any

from ipmaclient.config.utils import set_nested_value


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'IPMA_BASE_URL': ('api', 'base_url'),
        'IPMA_TIMEOUT': ('api', 'timeout'),
        'IPMA_USER_AGENT': ('api', 'user_agent'),
        'IPMA_LOG_LEVEL': ('logging', 'level'),
        'IPMA_LOG_FILE': ('logging', 'file'),
        'IPMA_LOG_FORMAT': ('logging', 'format'),
    }

    CONFIG_FILE_VAR = 'IPMA_CONFIG_FILE'

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.

        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                set_nested_value(config, path, value)

    @classmethod
    def get_config_file(cls) -> str | None:
        """Get configuration file path from environment."""
        return cls.get_env_value(cls.CONFIG_FILE_VAR)
