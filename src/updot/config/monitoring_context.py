"""
Configuration context for the website availability monitor.

This module defines a data structure that holds all configuration parameters
of the monitor. It serves as a central point for passing configuration
throughout the application.
"""

from typing import NamedTuple

from updot.domain import CheckMode


class MonitoringContext(NamedTuple):
    """
    A data structure containing all configuration parameters of the monitor.

    This class is immutable and provides a type-safe way to pass configuration
    throughout the application. It is created by parsing command-line arguments
    and environment variables.

    Attributes:
        url: The primary URL of the monitored site.
        user_agent: Value of the User-Agent header sent with every probe.
        check_mode: The check strategy to apply.
        monitor_id: Unique identifier for this monitor instance.
        logging_type: Type of logging configuration to use (dev, prod, or custom).
        logging_config_file: Path to custom logging configuration file (if logging_type is 'custom').
        max_timeout: Timeout in seconds of a single HTTP request.
    """

    url: str
    user_agent: str
    check_mode: CheckMode
    monitor_id: str
    logging_type: str
    logging_config_file: str
    max_timeout: float
