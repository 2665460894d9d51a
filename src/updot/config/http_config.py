"""
HTTP client configuration module for the website availability monitor.

This module provides functionality to create the HTTP client session shared
by every probe, using the aiohttp library.
"""

import logging

import aiohttp

from updot.config import MonitoringContext


def get_http_session(context: MonitoringContext) -> aiohttp.ClientSession:
    """
    Create and configure an HTTP client session based on the provided configuration.

    Using a shared session is recommended for performance reasons. Timeouts and
    the User-Agent header are set per request by the probe, so the session
    itself carries no defaults for them.

    Args:
        context: Configuration context containing HTTP client settings.

    Returns:
        aiohttp.ClientSession: A configured HTTP client session that can be used to make HTTP requests.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"Creating HTTP session for monitor {context.monitor_id}")
    return aiohttp.ClientSession()
