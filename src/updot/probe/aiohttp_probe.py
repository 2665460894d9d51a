"""
HTTP probe implementation using the aiohttp library.

This module provides an implementation of the HttpProbe interface that uses
the aiohttp library to perform a single HTTP request. It handles timing and
translates every failure into a classified ProbeOutcome.
"""

import asyncio
import logging
import socket
import time
from typing import Optional

import aiohttp

from updot.contracts import HttpProbe
from updot.domain import HttpMethod, ProbeFailure, ProbeOutcome

# Module logger
logger = logging.getLogger(__name__)


def classify_failure(error: Exception) -> ProbeFailure:
    """
    Maps an exception raised by aiohttp to a ProbeFailure.

    Args:
        error: The exception raised while performing the request.

    Returns:
        ProbeFailure: The classified reason of the failure.
    """
    if isinstance(error, aiohttp.ClientConnectorDNSError):
        return ProbeFailure.DNS_RESOLUTION_FAILURE
    if isinstance(error, aiohttp.ClientConnectorError) and isinstance(
        error.os_error, socket.gaierror
    ):
        return ProbeFailure.DNS_RESOLUTION_FAILURE
    # Checked before ClientConnectionError: ServerTimeoutError derives from both
    if isinstance(error, asyncio.TimeoutError):
        return ProbeFailure.TIMEOUT
    if isinstance(error, aiohttp.ClientConnectionError):
        return ProbeFailure.CONNECTION_ERROR
    if isinstance(error, aiohttp.ClientResponseError):
        return ProbeFailure.UNEXPECTED_RESPONSE
    return ProbeFailure.OTHER


class AiohttpProbe(HttpProbe):
    """
    A concrete implementation of HttpProbe using the aiohttp library.

    It uses a shared aiohttp ClientSession for optimal performance and never
    lets a network error escape: every outcome is returned as a ProbeOutcome.
    """

    def __init__(self, monitor_id: str, session: aiohttp.ClientSession) -> None:
        """
        Initializes the probe with a shared aiohttp ClientSession.

        Args:
            monitor_id: A unique identifier for this monitor instance.
            session: An active aiohttp.ClientSession to be used for requests.
        """
        self._monitor_id: str = monitor_id
        self._session: aiohttp.ClientSession = session

    async def probe(
        self,
        url: str,
        method: HttpMethod,
        timeout_seconds: float,
        user_agent: str,
    ) -> ProbeOutcome:
        """
        Performs one HTTP request and records its status code or failure.

        Args:
            url: The URL to request.
            method: The HTTP method to use.
            timeout_seconds: Total timeout of the request.
            user_agent: Value of the User-Agent header.

        Returns:
            ProbeOutcome: The classified outcome of the request.
        """
        logger.debug(f"Starting {method.value} probe for {url}")
        error: Optional[Exception] = None
        failure: Optional[ProbeFailure] = None
        status_code: Optional[int] = None
        start_time: float = time.time()

        try:
            async with self._session.request(
                method.value,
                url,
                timeout=aiohttp.ClientTimeout(total=timeout_seconds),
                headers={"User-Agent": user_agent},
            ) as response:
                status_code = response.status
        except Exception as e:
            error = e
            failure = classify_failure(e)

        end_time: float = time.time()
        if failure is None:
            logger.info(
                f"probe method={method.value} url={url} status={status_code} "
                f"elapsed={end_time - start_time:.3f}s"
            )
        else:
            logger.warning(
                f"probe method={method.value} url={url} failure={failure.value} "
                f"elapsed={end_time - start_time:.3f}s error={error!r}"
            )

        return ProbeOutcome(
            url=url,
            method=method,
            status_code=status_code,
            failure=failure,
            error=error,
            start_time=start_time,
            end_time=end_time,
        )
