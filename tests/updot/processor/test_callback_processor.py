"""
Unit tests for the CallbackProcessor class.

The tests follow the Arrange-Act-Assert (AAA) pattern.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from updot.domain import CheckResult, Status
from updot.processor.callback_processor import CallbackProcessor

RESULT = CheckResult(Status.DOWN, datetime(2026, 10, 19, tzinfo=timezone.utc))


@pytest.mark.asyncio
async def test_process_should_call_sync_callback() -> None:
    """
    Tests that a plain function receives the result.
    """
    # Arrange
    callback = MagicMock(return_value=None)
    processor = CallbackProcessor(callback)

    # Act
    await processor.process(RESULT)

    # Assert
    callback.assert_called_once_with(RESULT)


@pytest.mark.asyncio
async def test_process_should_await_async_callback() -> None:
    """
    Tests that a coroutine function is awaited.
    """
    # Arrange
    callback = AsyncMock()
    processor = CallbackProcessor(callback)

    # Act
    await processor.process(RESULT)

    # Assert
    callback.assert_awaited_once_with(RESULT)
