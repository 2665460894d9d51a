"""
Main entry point for the website availability monitor.

This module initializes and runs the monitor. It sets up logging, creates the
HTTP session, wires the probe, strategy and monitor loop together, and
handles graceful shutdown when the application is terminated.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from updot.config import MonitoringContext, get_context
from updot.config.http_config import get_http_session
from updot.config.logging_config import configure_logging
from updot.domain import Target
from updot.monitor import MonitorLoop
from updot.probe.aiohttp_probe import AiohttpProbe
from updot.processor.delegating_processor import DelegatingResultProcessor
from updot.processor.logging_processor import LoggingProcessor
from updot.strategy import FallbackStrategy


async def main(context: MonitoringContext) -> None:
    """
    Set up and run the monitor until the task is cancelled.

    Args:
        context: Configuration context containing all application settings.

    Returns:
        None
    """
    logger: logging.Logger = logging.getLogger(__name__)
    logger.info("Starting application...")
    monitor_id: str = context.monitor_id

    target: Target = Target.for_url(
        context.url,
        user_agent=context.user_agent,
        timeout_seconds=context.max_timeout,
        mode=context.check_mode,
    )
    logger.info(
        f"configured: target url={target.url} alternate={target.alternate_url} "
        f"mode={target.mode.value}"
    )

    http_session: aiohttp.ClientSession = get_http_session(context)
    logger.info("configured: http_session")

    monitor: Optional[MonitorLoop] = None
    try:
        monitor = MonitorLoop(
            monitor_id=monitor_id,
            target=target,
            strategy=FallbackStrategy(
                monitor_id=monitor_id,
                probe=AiohttpProbe(monitor_id=monitor_id, session=http_session),
            ),
            processor=DelegatingResultProcessor(
                monitor_id,
                [LoggingProcessor(monitor_id=monitor_id, url=target.url)],
            ),
        )
        await monitor.start()
        logger.info("Monitor started.")

        # The monitor runs in the background until this task is cancelled
        await asyncio.Event().wait()

    except asyncio.CancelledError:
        logger.info("Application shutdown requested.")
    finally:
        logger.info("Shutting down resources...")
        if monitor:
            await monitor.stop()
        await http_session.close()
        logger.info("Shutdown complete.")


def run() -> None:
    """Console script entry point."""
    try:
        # Parse command-line arguments and environment variables
        updot_context: MonitoringContext = get_context()

        # Configure logging based on the context
        configure_logging(updot_context)

        asyncio.run(main(updot_context))
    except KeyboardInterrupt:
        logging.info("Shutdown initiated by user (Ctrl+C).")


if __name__ == "__main__":
    run()
