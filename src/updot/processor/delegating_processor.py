"""
Delegating result processor implementation.

This module provides a composite implementation of the ResultProcessor interface
that hands every check result to several subscribers concurrently. A failing
subscriber never prevents the others from being notified.
"""

import asyncio
import logging
from typing import List

from updot.contracts import ResultProcessor
from updot.domain import CheckResult

# Module logger
logger = logging.getLogger(__name__)


class DelegatingResultProcessor(ResultProcessor):
    """
    A ResultProcessor that follows the Composite pattern.

    The monitor owns a single processor; this class lets any number of
    subscribers (display adapters, logging) share that single entry point.
    Subscribers can be added and removed while the monitor runs.
    """

    def __init__(self, monitor_id: str, processors: List[ResultProcessor]) -> None:
        """
        Initializes the delegator with a list of processors to delegate to.

        Args:
            monitor_id: A unique identifier for this monitor instance.
            processors: The subscribers notified of every result.
        """
        self._monitor_id: str = monitor_id
        self._processors: List[ResultProcessor] = list(processors)

    def subscribe(self, processor: ResultProcessor) -> None:
        self._processors.append(processor)

    def unsubscribe(self, processor: ResultProcessor) -> None:
        """Removes a subscriber; unknown subscribers are ignored."""
        if processor in self._processors:
            self._processors.remove(processor)

    async def _process_with_one(self, processor: ResultProcessor, result: CheckResult) -> None:
        """
        Runs a single processor, logging instead of propagating its failure.

        Args:
            processor: The individual processor to run.
            result: The check result to be processed.

        Returns:
            None
        """
        try:
            await processor.process(result)
        except Exception as e:
            logger.exception(
                f"Processor '{type(processor).__name__}' failed for status {result.status.value} with error: {e}",
            )

    async def process(self, result: CheckResult) -> None:
        """
        Notifies every subscriber of the result concurrently.

        Args:
            result: The check result that has just become current.

        Returns:
            None
        """
        if not self._processors:
            return

        # Snapshot, subscribers may change while we are awaiting
        tasks = [self._process_with_one(processor, result) for processor in list(self._processors)]
        await asyncio.gather(*tasks)
