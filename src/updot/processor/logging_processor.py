"""
Logging result processor.

This module provides a processor that writes one structured log line per
resolved check, so operators can follow the availability of the site and
debug connectivity issues from the logs alone.
"""

import logging
from typing import Optional

from updot.contracts import ResultProcessor
from updot.domain import CheckResult, Status

# Module logger
logger = logging.getLogger(__name__)


class LoggingProcessor(ResultProcessor):
    """
    Logs every check result and highlights status transitions.

    A transition to DOWN is logged as a warning, every other result at info
    level.
    """

    def __init__(self, monitor_id: str, url: str) -> None:
        """
        Args:
            monitor_id: A unique identifier for this monitor instance.
            url: The monitored URL, included in every line.
        """
        self._monitor_id: str = monitor_id
        self._url: str = url
        self._previous: Optional[Status] = None

    async def process(self, result: CheckResult) -> None:
        checked_at = result.checked_at.isoformat() if result.checked_at else None
        line = f"check url={self._url} status={result.status.value} checked_at={checked_at}"

        if self._previous is not None and self._previous is not result.status:
            line += f" previous={self._previous.value}"
            if result.status is Status.DOWN:
                logger.warning(f"{line} transition=down")
            else:
                logger.info(f"{line} transition={result.status.value}")
        else:
            logger.info(line)

        self._previous = result.status
