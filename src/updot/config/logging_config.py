"""
Logging configuration module for the website availability monitor.

This module configures logging from JSON dictConfig files: one of the
built-in configurations packaged next to this module (dev, prod) or a custom
file supplied by the operator.
"""

import json
import logging.config
import os
from typing import Any, Dict

from updot.config import MonitoringContext

BUILT_IN_CONFIGS: Dict[str, str] = {
    "dev": "logging-config-dev.json",
    "prod": "logging-config-prod.json",
}


def configure_logging(context: MonitoringContext) -> None:
    """
    Configure logging for the application based on the provided configuration.

    Supported logging types:
    - dev: human readable, debug level output on stderr
    - prod: one key=value line per record, info level
    - custom: the file named by 'logging_config_file'

    Every handler of the root logger also receives a filter that adds the
    monitor ID to each record, so formatters may reference %(monitor_id)s.

    Args:
        context: Configuration context containing logging settings.

    Raises:
        ValueError: If the logging type is invalid or if a custom logging
            configuration file is not provided when using the 'custom' type.
        RuntimeError: If the configuration file cannot be loaded.
    """
    logging_type: str = context.logging_type.lower()
    if not logging_type:
        raise ValueError("Logging type must be provided.")

    if logging_type in BUILT_IN_CONFIGS:
        config_file = _get_local_package_file_path(BUILT_IN_CONFIGS[logging_type])
    elif logging_type == "custom":
        if not context.logging_config_file:
            raise ValueError("Custom logging configuration file must be provided.")
        config_file = context.logging_config_file
    else:
        raise ValueError(
            f"Invalid logging type: {context.logging_type}. Allowed values are: dev, prod, custom"
        )

    _load_logging_config(config_file)

    monitor_filter = _MonitorIdFilter(monitor_id=context.monitor_id)
    root_logger = logging.getLogger()
    # Filters on a logger do not apply to records propagated from child loggers
    for handler in root_logger.handlers:
        handler.addFilter(monitor_filter)

    logging.debug(f"Logging configured from {config_file}")


def _load_logging_config(config_file: str) -> None:
    """
    Load a dictConfig logging configuration from a JSON file.

    Args:
        config_file: Path to the JSON file containing logging configuration.

    Raises:
        RuntimeError: If the file is not found, contains invalid JSON, or
            if there is any other error loading the configuration.
    """
    try:
        with open(config_file) as f:
            config: Dict[str, Any] = json.load(f)
        logging.config.dictConfig(config)
    except FileNotFoundError as err:
        raise RuntimeError(f"Logging config file not found: {config_file}") from err
    except json.JSONDecodeError as err:
        raise RuntimeError(f"Invalid JSON format in logging config file: {config_file}") from err
    except Exception as err:
        raise RuntimeError(f"Error loading logging config: {str(err)}") from err


def _get_local_package_file_path(config_file: str) -> str:
    return os.path.join(os.path.dirname(__file__), config_file)


class _MonitorIdFilter(logging.Filter):
    """Injects the monitor ID into every log record as 'monitor_id'."""

    def __init__(self, monitor_id: str) -> None:
        super().__init__()
        self._monitor_id: str = monitor_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.monitor_id = self._monitor_id
        return True
