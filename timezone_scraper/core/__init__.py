from .config import get_config, config_manager, ConfigurationManager, ConfigError, ConfigFileNotFoundError, InvalidYamlError
from .exceptions import (
    TimezoneScraperError,
    ConfigurationError,
    ComponentError,
    DownloadError,
    ParseError,
    WriteError,
    ReadbackError,
)
from .logger import setup_logging, get_logger

__all__ = [
    # Config
    "get_config",
    "config_manager",
    "ConfigurationManager",
    "ConfigError",
    "ConfigFileNotFoundError",
    "InvalidYamlError",
    # Logger
    "setup_logging",
    "get_logger",
    # Exceptions
    "TimezoneScraperError",
    "ConfigurationError",
    "ComponentError",
    "DownloadError",
    "ParseError",
    "WriteError",
    "ReadbackError",
]
