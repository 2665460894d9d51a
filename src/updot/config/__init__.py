"""
Configuration module for the website availability monitor.

This module provides functionality to parse command-line arguments and environment
variables to create a configuration context for the monitor. It defines
default values and help text for all configurable parameters.
"""

import argparse
import os
from typing import Any, List, Optional
from uuid import uuid4

from updot.config.constants import (
    DEFAULT_CHECK_MODE,
    DEFAULT_LOGGING_CONFIG_FILE,
    DEFAULT_LOGGING_TYPE,
    DEFAULT_MAX_TIMEOUT,
    DEFAULT_MONITOR_ID_PREFIX,
    DEFAULT_URL,
    DEFAULT_USER_AGENT,
)
from updot.config.monitoring_context import MonitoringContext
from updot.domain import CheckMode


def get_context(argv: Optional[List[str]] = None) -> MonitoringContext:
    """
    Parse command-line arguments and environment variables to create a configuration context.

    This function creates an argument parser with options for all configurable aspects
    of the monitor. For each option, it first checks for a command-line argument,
    then falls back to an environment variable, and finally uses a default value.

    Args:
        argv: The arguments to parse. Defaults to sys.argv[1:].

    Returns:
        MonitoringContext: A configuration context object containing all parsed settings.

    Raises:
        ValueError: If the check mode is not one of the supported modes.
    """
    parser = argparse.ArgumentParser(
        description="Periodically checks whether a website is reachable."
    )

    parser.add_argument(
        "-u",
        "--url",
        type=str,
        default=os.getenv("UPDOT_URL", DEFAULT_URL),
        help="Specifies the URL of the site to monitor.\n"
        "If not provided, the value is read from the UPDOT_URL environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_URL} is used.",
    )

    parser.add_argument(
        "-ua",
        "--user-agent",
        type=str,
        default=os.getenv("UPDOT_USER_AGENT", DEFAULT_USER_AGENT),
        help="Specifies the User-Agent header sent with every request.\n"
        "If not provided, the value is read from the UPDOT_USER_AGENT environment variable.\n"
        f"If that is also absent, a default value of '{DEFAULT_USER_AGENT}' is used.",
    )

    parser.add_argument(
        "-cm",
        "--check-mode",
        type=str,
        default=os.getenv("UPDOT_CHECK_MODE", DEFAULT_CHECK_MODE),
        help="Specifies how a check is performed.\n"
        "Allowed values: head-with-fallback, get-only (case insensitive).\n"
        "If not provided, the value is read from the UPDOT_CHECK_MODE environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_CHECK_MODE} is used.",
    )

    parser.add_argument(
        "-mid",
        "--monitor-id",
        type=str,
        default=os.getenv("UPDOT_MONITOR_ID", f"{DEFAULT_MONITOR_ID_PREFIX}{uuid4()}"),
        help="Specifies the identifier of this monitor instance.\n"
        "If not provided, the value is read from the UPDOT_MONITOR_ID environment variable.\n"
        f"If that is also absent, the default value will be {DEFAULT_MONITOR_ID_PREFIX}uuid4().",
    )

    parser.add_argument(
        "-lt",
        "--logging-type",
        type=str,
        default=os.getenv("UPDOT_LOGGING_TYPE", DEFAULT_LOGGING_TYPE),
        help="Specifies the logging configuration type to use.\n"
        "Allowed values: dev, prod, custom (case insensitive).\n"
        "For 'dev' and 'prod', system will use built-in configurations.\n"
        "For 'custom', the --logging-config-file argument is required.",
    )

    parser.add_argument(
        "-lcf",
        "--logging-config-file",
        type=str,
        default=os.getenv("UPDOT_LOGGING_CONFIG_FILE", DEFAULT_LOGGING_CONFIG_FILE),
        help="Path to custom logging configuration file.\n"
        "Required when --logging-type is set to 'custom'.",
    )

    parser.add_argument(
        "-mt",
        "--max-timeout",
        type=float,
        default=float(os.getenv("UPDOT_MAX_TIMEOUT", DEFAULT_MAX_TIMEOUT)),
        help="Specifies the timeout in seconds of a single HTTP request.\n"
        "If not provided, the value is read from the UPDOT_MAX_TIMEOUT environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_MAX_TIMEOUT} seconds is used.",
    )

    # Parse the command-line arguments
    args: Any = parser.parse_args(argv)

    # Parse the check mode parameter
    try:
        check_mode = CheckMode(args.check_mode.lower())
    except ValueError as err:
        raise ValueError(
            f"Invalid check mode: {args.check_mode}. "
            f"Allowed values are: {', '.join(mode.value for mode in CheckMode)}"
        ) from err

    # Create and return a MonitoringContext with the parsed settings
    return MonitoringContext(
        url=args.url,
        user_agent=args.user_agent,
        check_mode=check_mode,
        monitor_id=args.monitor_id,
        logging_type=args.logging_type,
        logging_config_file=args.logging_config_file,
        max_timeout=args.max_timeout,
    )
