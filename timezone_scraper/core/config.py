"""
Configuration management for the timezone scraper.

This module provides a singleton `ConfigurationManager` class that loads
settings from YAML files. The environment-specific file (e.g. development.yaml)
is selected by the APP_ENV environment variable and holds the command-line
defaults, per-component settings and the logging setup.

Key Features:
- Loads settings from YAML files based on APP_ENV environment variable.
- Defaults to 'development' environment if APP_ENV is not set.
- Provides a global `config_manager` instance for easy access.
- Supports dot notation for accessing nested keys (e.g., "defaults.url").
"""
import logging
import os
import yaml
from typing import Any, Dict, Optional

from timezone_scraper.core.exceptions import ConfigurationError

# Config files (development.yaml, ...) live in timezone_scraper/config/.
CONFIG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "config")

DEFAULT_ENV = "development"

# Plain logging here: core.logger imports this module.
logger = logging.getLogger(__name__)


class ConfigError(ConfigurationError):
    """Base class for all configuration-loading errors."""
    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when the configuration file for an environment cannot be found."""
    pass


class InvalidYamlError(ConfigError):
    """Raised when a configuration file contains invalid YAML syntax or is not a dictionary."""
    pass


class ConfigurationManager:
    """
    Manages loading and accessing configuration settings from YAML files.

    This class is implemented as a singleton. The first time an instance is created,
    it loads the configuration. Subsequent instantiations return the existing instance.
    """
    CONFIG_DIR: str = CONFIG_DIR

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}
    _current_env: str = ""

    def __new__(cls) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super(ConfigurationManager, cls).__new__(cls)
            cls._instance.load_config()
        return cls._instance

    def load_config(self, env: Optional[str] = None) -> None:
        """
        Loads configuration from a YAML file corresponding to the specified environment.

        The environment is determined in the following order of precedence:
        1. The `env` parameter passed to this method.
        2. The `APP_ENV` environment variable.
        3. `DEFAULT_ENV` (if neither of the above is set).

        Args:
            env (Optional[str]): The environment name (e.g., "production") to load.

        Raises:
            ConfigFileNotFoundError: If the YAML file for the target environment is not found.
            InvalidYamlError: If the YAML file is malformed or not a dictionary.
        """
        target_env = env or os.getenv("APP_ENV", DEFAULT_ENV)
        config_file_path = os.path.join(self.CONFIG_DIR, f"{target_env}.yaml")

        try:
            with open(config_file_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigFileNotFoundError(
                f"Configuration file not found for environment '{target_env}' at '{config_file_path}'. "
                f"Ensure '{target_env}.yaml' exists in the '{self.CONFIG_DIR}' directory."
            )
        except yaml.YAMLError as e:
            raise InvalidYamlError(
                f"Error parsing YAML in configuration file '{config_file_path}': {e}"
            )
        if not isinstance(loaded, dict):
            raise InvalidYamlError(
                f"Configuration file '{config_file_path}' does not contain a valid YAML dictionary."
            )
        self._config = loaded
        self._current_env = target_env

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Retrieves a configuration value for the given key.

        Supports accessing nested values using dot notation (e.g., "components.writer.extra_column").
        If the key is not found, returns the provided default value.
        """
        value = self._config
        try:
            for k_part in key.split("."):
                if isinstance(value, dict):
                    value = value[k_part]
                else:
                    return default
            return value
        except (KeyError, TypeError):
            return default

    def reload_config(self, env: Optional[str] = None) -> None:
        """
        Reloads the configuration, either for the current environment or for `env`.
        """
        old_env = self._current_env
        self.load_config(env or old_env)
        logger.info(
            "Configuration reloaded. Previous environment '%s', current environment '%s'.",
            old_env, self._current_env,
        )

    @property
    def current_environment(self) -> str:
        """The name of the currently loaded configuration environment."""
        return self._current_env


# Global instance, created (and loaded) on first import.
config_manager = ConfigurationManager()


def get_config(key: str, default: Optional[Any] = None) -> Any:
    """
    A convenience function to access configuration values via the global `config_manager`.
    """
    return config_manager.get(key, default)
