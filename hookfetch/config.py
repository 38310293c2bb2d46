"""
load the config from config.yaml and .env
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any

from dotenv import find_dotenv, load_dotenv

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class Config:
    """Configuration loader that reads from config.yaml and environment variables."""

    def __init__(self, config_path: str = None, load_env_file: bool = False):
        """Initialize configuration loader.

        Args:
            config_path: Path to a config.yaml file. If None, HOOKFETCH_CONFIG
                        is used, then the config.yaml shipped with the package.
            load_env_file: Load a .env file found from the working directory
                        into os.environ before reading overrides.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        explicit = config_path or os.getenv('HOOKFETCH_CONFIG')
        self.config_path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
        self._required = bool(explicit)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and override with environment variables."""
        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            if self._required:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            config = {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'HOOKFETCH_USER_AGENT': ('fetcher', 'user_agent'),
            'HOOKFETCH_TIMEOUT': ('fetcher', 'timeout'),
            'HOOKFETCH_FOLLOW_REDIRECTS': ('fetcher', 'follow_redirects'),
            'HOOKFETCH_MAX_REDIRECTS': ('fetcher', 'max_redirects'),
            'LOG_LEVEL': ('logging', 'level'),
            'LOG_FORMAT': ('logging', 'format'),
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                current = config
                for key in config_path[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                current[config_path[-1]] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str):
        """Convert environment variable string to appropriate Python type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, *keys, default=None):
        """Get configuration value by nested keys.

        Args:
            *keys: Configuration keys (e.g., 'fetcher', 'timeout')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def fetcher(self) -> Dict[str, Any]:
        """Get HTTP transport configuration."""
        return self.get('fetcher', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get('logging', default={})


# Global configuration instance
config = Config()
