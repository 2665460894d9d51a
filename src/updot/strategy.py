"""
Fallback strategy for the website availability monitor.

This module reduces one or more probes of a Target to a single Status. The
decision tree is expressed as a plan: a table of named steps, each naming the
request to issue and the step to continue with when the probe does not show
the site alive. A single driver walks the plan until a verdict is reached.
"""

import logging
from typing import Callable, Dict, NamedTuple, Optional

from updot.contracts import HttpProbe
from updot.domain import (
    METHOD_NOT_ALLOWED,
    CheckMode,
    HttpMethod,
    ProbeFailure,
    ProbeOutcome,
    Status,
    Target,
)

# Module logger
logger = logging.getLogger(__name__)

# Chooses the next step after a probe that did not show the site alive.
# Returning None ends the cycle with Status.DOWN.
NextStep = Callable[[ProbeOutcome, Target], Optional[str]]


class ProbeStep(NamedTuple):
    """
    A single entry of a probe plan.

    Attributes:
        method: The HTTP method of the request.
        use_alternate: Whether the request goes to the alternate URL.
        on_failure: Picks the next step when the probe is not alive.
    """

    method: HttpMethod
    use_alternate: bool
    on_failure: NextStep


def _is_dns_failure_with_alternate(outcome: ProbeOutcome, target: Target) -> bool:
    return (
        outcome.failure is ProbeFailure.DNS_RESOLUTION_FAILURE
        and target.alternate_url is not None
    )


def _after_primary_head(outcome: ProbeOutcome, target: Target) -> Optional[str]:
    if outcome.status_code == METHOD_NOT_ALLOWED:
        return "get_after_head_not_allowed"
    return _after_request_failure(outcome, target)


def _after_request_failure(outcome: ProbeOutcome, target: Target) -> Optional[str]:
    # A response, whatever its code, is final; only failed requests fall back
    if outcome.status_code is not None:
        return None
    if _is_dns_failure_with_alternate(outcome, target):
        return "alternate_head"
    return "primary_get"


def _after_primary_get(outcome: ProbeOutcome, target: Target) -> Optional[str]:
    if _is_dns_failure_with_alternate(outcome, target):
        return "alternate_get"
    return None


def _continue_with_primary_get(outcome: ProbeOutcome, target: Target) -> Optional[str]:
    return "primary_get"


def _stop(outcome: ProbeOutcome, target: Target) -> Optional[str]:
    return None


HEAD_WITH_FALLBACK_PLAN: Dict[str, ProbeStep] = {
    "primary_head": ProbeStep(HttpMethod.HEAD, False, _after_primary_head),
    "get_after_head_not_allowed": ProbeStep(HttpMethod.GET, False, _after_request_failure),
    "alternate_head": ProbeStep(HttpMethod.HEAD, True, _continue_with_primary_get),
    "primary_get": ProbeStep(HttpMethod.GET, False, _after_primary_get),
    "alternate_get": ProbeStep(HttpMethod.GET, True, _stop),
}

GET_ONLY_PLAN: Dict[str, ProbeStep] = {
    "primary_get": ProbeStep(HttpMethod.GET, False, _stop),
}

PLANS: Dict[CheckMode, Dict[str, ProbeStep]] = {
    CheckMode.HEAD_WITH_FALLBACK: HEAD_WITH_FALLBACK_PLAN,
    CheckMode.GET_ONLY: GET_ONLY_PLAN,
}

# The first entry of every plan is its starting step
FIRST_STEPS: Dict[CheckMode, str] = {
    mode: next(iter(plan)) for mode, plan in PLANS.items()
}


class FallbackStrategy:
    """
    Reduces the probes of a check cycle to a single Status.

    Probes are issued sequentially, since every step depends on the outcome
    of the previous one. The first alive probe ends the cycle with UP; a step
    with no successor ends it with DOWN. The driver never issues more probes
    than the plan has steps, so every cycle terminates with UP or DOWN.
    """

    def __init__(self, monitor_id: str, probe: HttpProbe) -> None:
        """
        Initializes the strategy.

        Args:
            monitor_id: A unique identifier for this monitor instance.
            probe: Component that performs the individual HTTP requests.
        """
        self._monitor_id: str = monitor_id
        self._probe: HttpProbe = probe

    async def resolve(self, target: Target) -> Status:
        """
        Runs the check plan of the target's mode and returns its verdict.

        Args:
            target: The site to check.

        Returns:
            Status: Status.UP or Status.DOWN, never Status.UNKNOWN.
        """
        plan: Dict[str, ProbeStep] = PLANS[target.mode]
        step_name: Optional[str] = FIRST_STEPS[target.mode]
        status: Status = Status.DOWN
        probes: int = 0

        while step_name is not None and probes < len(plan):
            step: ProbeStep = plan[step_name]
            url: Optional[str] = target.alternate_url if step.use_alternate else target.url
            if url is None:
                # Plans only route to alternate steps when an alternate exists
                logger.error(f"Step '{step_name}' requires an alternate URL; giving up")
                break

            outcome: ProbeOutcome = await self._probe.probe(
                url, step.method, target.timeout_seconds, target.user_agent
            )
            probes += 1

            if outcome.is_alive:
                status = Status.UP
                break

            next_step: Optional[str] = step.on_failure(outcome, target)
            if next_step is not None:
                logger.info(
                    f"{step.method.value} {url} not alive "
                    f"({outcome.failure.value if outcome.failure else outcome.status_code}), "
                    f"continuing with '{next_step}'"
                )
            step_name = next_step

        logger.info(
            f"resolved url={target.url} mode={target.mode.value} "
            f"status={status.value} probes={probes}"
        )
        return status
