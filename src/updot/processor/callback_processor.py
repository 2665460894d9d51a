"""
Callback result processor.

Adapts a plain callable, synchronous or asynchronous, to the ResultProcessor
interface. This is the hook a display layer uses to redraw its status icon.
"""

import inspect
from typing import Any, Callable

from updot.contracts import ResultProcessor
from updot.domain import CheckResult


class CallbackProcessor(ResultProcessor):
    """Calls the given function with every check result."""

    def __init__(self, callback: Callable[[CheckResult], Any]) -> None:
        self._callback: Callable[[CheckResult], Any] = callback

    async def process(self, result: CheckResult) -> None:
        outcome = self._callback(result)
        if inspect.isawaitable(outcome):
            await outcome
