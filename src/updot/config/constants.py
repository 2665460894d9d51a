"""
Constants for the website availability monitor.

This module defines the fixed timing of the monitor and the default values of
the configurable parameters. The defaults are used as fallback values when
neither command-line arguments nor environment variables are provided.
"""

# Scheduling, not configurable
CHECK_INTERVAL_SECONDS = 30

# Target configuration defaults
DEFAULT_URL = "https://www.example.com/"
DEFAULT_USER_AGENT = "UpDot/1.0 (+macOS)"
DEFAULT_CHECK_MODE = "head-with-fallback"

# HTTP configuration defaults
DEFAULT_MAX_TIMEOUT = 5

# Monitor configuration defaults
DEFAULT_MONITOR_ID_PREFIX = "updot-"

# Logging configuration defaults
DEFAULT_LOGGING_TYPE = "prod"
DEFAULT_LOGGING_CONFIG_FILE = ""
