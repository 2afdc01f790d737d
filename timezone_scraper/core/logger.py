"""
Centralized logging setup for the timezone scraper.

This module provides functions to configure and obtain logger instances
throughout the application. It reads logging settings from the `logging`
section of the YAML configuration, supporting console and rotating file
handlers.

Key Functions:
- `setup_logging()`: Initializes the logging system based on external configuration.
                     Should be called once at application startup (the CLI does this).
- `get_logger(name)`: Returns a logger instance for the specified module name.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any

from timezone_scraper.core.config import ConfigurationManager

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Global flag to prevent multiple initializations of the logging system.
_logging_initialized = False


def setup_logging(config: Optional[ConfigurationManager] = None, level_override: Optional[str] = None) -> None:
    """
    Sets up centralized logging for the application using settings from the
    provided `ConfigurationManager` instance.

    The root logger gets the handlers (console, rotating file) and format
    described in the 'logging' section of the configuration. Falls back to
    `logging.basicConfig` when no configuration or no 'logging' section is available.

    Args:
        config (Optional[ConfigurationManager]): The configuration manager instance.
            If None, the global `config_manager` is used.
        level_override (Optional[str]): A level name (e.g. "DEBUG") taking precedence
            over the configured level.
    """
    global _logging_initialized
    if _logging_initialized:
        logging.getLogger(__name__).debug("Logging setup_logging: Already initialized.")
        return

    current_config = config
    if current_config is None:
        from timezone_scraper.core.config import config_manager as global_config_manager
        current_config = global_config_manager

    log_settings: Optional[Dict[str, Any]] = current_config.get("logging") if current_config else None

    if not log_settings:
        logging.basicConfig(level=(level_override or "INFO").upper(), format=DEFAULT_LOG_FORMAT)
        logging.warning("Logging setup: 'logging' section not found in configuration. Using basicConfig.")
        _logging_initialized = True
        return

    log_level_str = (level_override or log_settings.get("level", "INFO")).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    log_format = log_settings.get("format", DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()

    # Drop handlers installed earlier (e.g. by basicConfig) to avoid duplicate output.
    if root_logger.hasHandlers():
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(log_format)

    handler_settings = log_settings.get("handlers", {}) or {}

    console_handler_settings = handler_settings.get("console", {}) or {}
    if console_handler_settings.get("enabled", False):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    file_handler_settings = handler_settings.get("file", {}) or {}
    if file_handler_settings.get("enabled", False):
        # Relative log paths are resolved against the working directory.
        log_file_path = os.path.abspath(file_handler_settings.get("path", "logs/timezone_scraper.log"))
        max_bytes = int(file_handler_settings.get("max_bytes", 10 * 1024 * 1024))
        backup_count = int(file_handler_settings.get("backup_count", 5))

        try:
            log_dir = os.path.dirname(log_file_path)
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)

            file_handler = RotatingFileHandler(
                filename=log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            logging.error(f"Logging setup: Failed to configure file logging at '{log_file_path}': {e}. File logging disabled.")

    _logging_initialized = True
    logging.debug(f"Logging system initialized. Level: {log_level_str}.")


def get_logger(name: str) -> logging.Logger:
    """
    Retrieves a logger instance with the specified name.

    Modules call this at import time; handlers are attached to the root logger
    later by `setup_logging()`, so no setup is forced here.

    Args:
        name (str): The name for the logger, typically `__name__` of the calling module.

    Returns:
        logging.Logger: An instance of `logging.Logger`.
    """
    return logging.getLogger(name)
