"""
Core interfaces for the website availability monitor.

This module defines the abstract base classes that form the seams of the
monitor: the component performing a single HTTP request, and the components
notified whenever a check cycle produces a new result.
"""

import abc

from .domain import CheckResult, HttpMethod, ProbeOutcome


class HttpProbe(abc.ABC):
    """
    Abstract interface for a component that performs one HTTP request.

    Its responsibility is to encapsulate the network I/O of a single attempt
    and classify its outcome. Retries belong to the caller.
    """

    @abc.abstractmethod
    async def probe(
        self,
        url: str,
        method: HttpMethod,
        timeout_seconds: float,
        user_agent: str,
    ) -> ProbeOutcome:
        """
        Issues a single HTTP request and classifies the outcome.

        Args:
            url: The URL to request.
            method: The HTTP method to use.
            timeout_seconds: Total timeout of the request.
            user_agent: Value of the User-Agent header.

        Returns:
            ProbeOutcome: Either the status code the server answered with, or
                the classified reason the request failed.

        Raises:
            asyncio.CancelledError: Only when the calling task is cancelled.
                Every network failure is represented in the ProbeOutcome.
        """
        pass


class ResultProcessor(abc.ABC):
    """
    Abstract interface for a subscriber to check results.

    Every result applied by the monitor is handed to its processor, which
    enables display adapters, logging or any other consumer to react to state
    changes without polling.
    """

    @abc.abstractmethod
    async def process(self, result: CheckResult) -> None:
        """
        Handles a single CheckResult that has just become current.

        Args:
            result: The result of a completed check cycle.

        Returns:
            None
        """
        pass
