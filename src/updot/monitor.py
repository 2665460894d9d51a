"""
Monitor loop for the website availability monitor.

This module provides the MonitorLoop class, which owns the current check
result, runs the periodic schedule and exposes the manual check used by the
display layer. It is the only component allowed to change observable state.
"""

import asyncio
import logging
from asyncio import Task
from datetime import datetime, timezone
from typing import Callable, Optional

from .config.constants import CHECK_INTERVAL_SECONDS
from .contracts import ResultProcessor
from .domain import INITIAL_RESULT, CheckResult, MonitorState, Status, Target
from .strategy import FallbackStrategy


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonitorLoop:
    """
    Periodically checks one target and keeps the latest CheckResult.

    All state changes happen on the event loop the monitor runs on, so the
    status and its timestamp are replaced together as a single CheckResult.
    Concurrent cycles (a manual check while a scheduled one is running) are
    allowed; whichever completes last wins.

    A run generation counter is bumped on every start() and stop(): a cycle
    that started before a restart or a stop() and completes after it is
    discarded instead of applied.
    """

    def __init__(
        self,
        monitor_id: str,
        target: Target,
        strategy: FallbackStrategy,
        processor: Optional[ResultProcessor] = None,
        interval: float = CHECK_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initializes a new MonitorLoop instance in the IDLE state.

        Args:
            monitor_id: A unique identifier for this monitor instance.
            target: The site to check.
            strategy: Component that reduces the probes of a cycle to a Status.
            processor: Optional subscriber notified of every applied result.
            interval: Seconds between the starts of two scheduled checks.
            clock: Returns the timestamp recorded when a cycle completes.
        """
        self._monitor_id: str = monitor_id
        self._target: Target = target
        self._strategy: FallbackStrategy = strategy
        self._processor: Optional[ResultProcessor] = processor
        self._interval: float = interval
        self._clock: Callable[[], datetime] = clock
        self._logger: logging.Logger = logging.getLogger(__name__)
        self._result: CheckResult = INITIAL_RESULT
        self._state: MonitorState = MonitorState.IDLE
        self._generation: int = 0
        self._loop_task: Optional[Task] = None

    @property
    def current(self) -> CheckResult:
        """The latest applied CheckResult."""
        return self._result

    @property
    def status(self) -> Status:
        return self._result.status

    @property
    def last_checked(self) -> Optional[datetime]:
        return self._result.checked_at

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def target(self) -> Target:
        return self._target

    async def start(self) -> None:
        """
        Starts the periodic schedule, replacing any schedule already running.

        The first check happens immediately, the following ones every
        'interval' seconds until stop() is called.

        Returns:
            None
        """
        previous: Optional[Task] = self._loop_task
        if previous is not None:
            self._logger.info("Monitor already running, restarting the schedule.")

        self._logger.info(
            f"Starting monitor loop for {self._target.url} every {self._interval}s."
        )
        # The handle is replaced before any await, so overlapping start() and
        # stop() calls always see, and cancel, the newest loop
        self._generation += 1
        self._state = MonitorState.RUNNING
        self._loop_task = asyncio.create_task(self._run(self._generation))

        if previous is not None:
            await self._cancel(previous)

    async def stop(self) -> None:
        """
        Stops the periodic schedule.

        Cancels the pending wait and any scheduled cycle in flight. Manual
        checks still running will not apply their result. Calling stop() when
        the monitor is not running does nothing.

        Returns:
            None
        """
        if self._state is not MonitorState.RUNNING:
            return

        self._logger.info("Stopping monitor loop")
        self._generation += 1
        self._state = MonitorState.STOPPED
        task, self._loop_task = self._loop_task, None
        if task is not None:
            await self._cancel(task)
        self._logger.info("Monitor loop stopped")

    async def check_now(self) -> CheckResult:
        """
        Performs one check cycle immediately, leaving the schedule untouched.

        Returns:
            CheckResult: The result applied by this cycle, or the current
                result if the cycle was discarded by a concurrent stop().
        """
        self._logger.info("Manual check requested")
        return await self._check(self._generation)

    @staticmethod
    async def _cancel(task: Task) -> None:
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def _run(self, generation: int) -> None:
        """
        The scheduled loop.

        Checks run sequentially on a fixed-rate grid. When a check overruns
        one or more periods, the missed ticks are skipped rather than queued,
        so scheduled cycles never overlap.

        Args:
            generation: The run generation this loop belongs to.

        Returns:
            None
        """
        loop = asyncio.get_running_loop()
        next_tick: float = loop.time()

        try:
            while True:
                try:
                    await self._check(generation)
                except Exception as e:
                    self._logger.exception(f"Check cycle failed with error: {e}")

                next_tick += self._interval
                now: float = loop.time()
                if now >= next_tick:
                    missed: int = int((now - next_tick) // self._interval) + 1
                    self._logger.warning(
                        f"Check cycle overran the {self._interval}s period, "
                        f"skipping {missed} scheduled tick(s)"
                    )
                    next_tick += missed * self._interval

                await asyncio.sleep(next_tick - loop.time())
        except asyncio.CancelledError:
            self._logger.info("Monitor loop cancelled.")
            raise

    async def _check(self, generation: int) -> CheckResult:
        """
        Runs one check cycle and applies its result.

        Args:
            generation: The run generation active when the cycle started.

        Returns:
            CheckResult: The applied result, or the current one if discarded.
        """
        status: Status = await self._strategy.resolve(self._target)

        if generation != self._generation:
            self._logger.info(
                f"Discarding result '{status.value}' of a check started before a restart or stop()"
            )
            return self._result

        # Status and timestamp are replaced in a single assignment
        result = CheckResult(status=status, checked_at=self._clock())
        self._result = result
        self._logger.info(
            f"Status set to {result.status.value}, last checked {result.checked_at.isoformat()}"
        )

        if self._processor is not None:
            try:
                await self._processor.process(result)
            except Exception as e:
                self._logger.exception(f"Result processor failed with error: {e}")

        return result
