"""
Domain models for the website availability monitor.

This module defines the core data structures used throughout the application:
the monitored target, the outcome of a single probe, and the result of a full
check cycle. These models serve as the foundation for the monitor's data flow.
"""

from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional
from urllib.parse import urlsplit, urlunsplit

ALIVE_STATUS_RANGE = range(200, 400)
METHOD_NOT_ALLOWED = 405
WWW_PREFIX = "www."


class Status(str, Enum):
    """
    Availability of the monitored site as shown to the user.

    UNKNOWN is only ever the value before the first check cycle completes.
    """

    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class HttpMethod(str, Enum):
    """
    HTTP methods used by the probes.

    Inheriting from 'str' allows enum members to behave like strings,
    making them compatible with libraries expecting string values.
    """

    HEAD = "HEAD"
    GET = "GET"


class CheckMode(str, Enum):
    """How a check cycle reaches its verdict."""

    HEAD_WITH_FALLBACK = "head-with-fallback"
    GET_ONLY = "get-only"


class ProbeFailure(str, Enum):
    """Classification of a probe that did not produce an HTTP status code."""

    DNS_RESOLUTION_FAILURE = "dns-resolution-failure"
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection-error"
    UNEXPECTED_RESPONSE = "unexpected-response"
    OTHER = "other"


class MonitorState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


def derive_alternate_url(url: str) -> Optional[str]:
    """
    Builds the alternate URL by adding a "www." prefix to the host.

    Args:
        url: The primary URL.

    Returns:
        Optional[str]: The same URL with "www." prepended to its host, or None
            if the host already carries the prefix or cannot be determined.
    """
    parts = urlsplit(url)
    host = parts.hostname
    if not host or host.startswith(WWW_PREFIX):
        return None

    # Keep user info and port untouched, only the host part changes
    userinfo, _, hostport = parts.netloc.rpartition("@")
    netloc = f"{WWW_PREFIX}{hostport}"
    if userinfo:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit(parts._replace(netloc=netloc))


class Target(NamedTuple):
    """
    The site to monitor with its complete, immutable configuration.

    Attributes:
        url: The primary URL to check.
        alternate_url: The URL to try after a DNS failure on the primary host,
            or None when no alternate exists.
        user_agent: Value of the User-Agent header sent with every probe.
        timeout_seconds: Total timeout of a single probe.
        mode: The check strategy to apply.
    """

    url: str
    alternate_url: Optional[str]
    user_agent: str
    timeout_seconds: float
    mode: CheckMode

    @classmethod
    def for_url(
        cls,
        url: str,
        user_agent: str,
        timeout_seconds: float,
        mode: CheckMode = CheckMode.HEAD_WITH_FALLBACK,
    ) -> "Target":
        """
        Creates a Target, deriving the alternate URL from the primary one.

        Args:
            url: The primary URL to check.
            user_agent: Value of the User-Agent header.
            timeout_seconds: Total timeout of a single probe.
            mode: The check strategy to apply.

        Returns:
            Target: The fully populated target.
        """
        return cls(
            url=url,
            alternate_url=derive_alternate_url(url),
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
            mode=mode,
        )


class ProbeOutcome(NamedTuple):
    """
    The outcome of a single HTTP request attempt.

    Exactly one of 'status_code' and 'failure' is set: either the server
    responded, or the attempt failed for a classified reason.

    Attributes:
        url: The URL that was probed.
        method: The HTTP method used.
        status_code: The HTTP status code received, or None if the probe failed.
        failure: The classified failure reason, or None if the server responded.
        error: The exception behind the failure, kept for diagnostics.
        start_time: The start time from time.time() in seconds.
        end_time: The end time from time.time() in seconds.
    """

    url: str
    method: HttpMethod
    status_code: Optional[int]
    failure: Optional[ProbeFailure]
    error: Optional[Exception]
    start_time: float
    end_time: float

    @property
    def is_alive(self) -> bool:
        """True if the server answered with a 2xx or 3xx status code."""
        return self.status_code is not None and self.status_code in ALIVE_STATUS_RANGE

    @property
    def elapsed(self) -> float:
        return self.end_time - self.start_time


class CheckResult(NamedTuple):
    """
    The result of one complete check cycle.

    Status and timestamp always travel together so that readers never observe
    a status from one cycle paired with the timestamp of another.

    Attributes:
        status: The resolved availability.
        checked_at: When the cycle completed, or None before the first check.
    """

    status: Status
    checked_at: Optional[datetime]


INITIAL_RESULT = CheckResult(status=Status.UNKNOWN, checked_at=None)
