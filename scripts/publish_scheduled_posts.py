#!/usr/bin/env python3
"""Publish scheduled posts once a minute.

Runs alongside the API as its own process. Each sweep opens a fresh
request scope, so it commits in its own transaction.
"""

import asyncio
import sys

import logfire

from inkwell.application.usecase.post import PublishScheduledPostsUseCase
from inkwell.config import Settings
from inkwell.util.di.container import create_script_container
from inkwell.util.logging import get_logger, setup_logging
from inkwell.util.observability import configure_logfire

logger = get_logger(__name__)


async def run_forever(settings: Settings) -> None:
    """Sweep for due posts every configured interval until cancelled."""
    container = create_script_container()
    interval = settings.scheduler.publish_interval_seconds

    try:
        while True:
            try:
                async with container() as request_container:
                    use_case = await request_container.get(PublishScheduledPostsUseCase)
                    result = await use_case.execute()
                if result.published:
                    logger.info(f"Published {result.published} scheduled post(s)")
            except Exception as e:
                # One failed sweep must not stop the scheduler
                logfire.error(
                    "Scheduled publish sweep failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=sys.exc_info(),
                )
            await asyncio.sleep(interval)
    finally:
        await container.close()


def main() -> int:
    """Run the scheduled publishing loop."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting scheduled post publisher",
        interval_seconds=settings.scheduler.publish_interval_seconds,
    )

    try:
        asyncio.run(run_forever(settings))
    except KeyboardInterrupt:
        logfire.info("Scheduled post publisher stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
