"""
One-shot background task that fetches a single earthquake.

The blocking fetch and parse run together on a worker thread. The single result
is published back on the event loop thread, where the consumer callback runs.
"""

import asyncio
import logging
from typing import Callable, Optional

from connectors.usgs import USGSConnector
from shared.models.models import Event

logger = logging.getLogger(__name__)


class EarthquakeTask:
    """
    Runs one fetch+parse off the loop thread and hands the Event to on_result.

    A task executes at most once. There is no cancellation: discard() only
    drops the result so the callback never fires.
    """

    def __init__(self, connector: USGSConnector, on_result: Callable[[Event], None]):
        self.connector = connector
        self.on_result = on_result
        self._task: Optional[asyncio.Task] = None
        self._discarded = False

    @property
    def done(self) -> bool:
        return self._task is not None and self._task.done()

    def execute(self, *urls: Optional[str]) -> asyncio.Task:
        """
        Schedule the background operation on the running event loop.

        Args:
            urls: Request URLs; only the first one is used

        Raises:
            RuntimeError: If the task was already executed or no loop is running
        """
        if self._task is not None:
            raise RuntimeError("Cannot execute task: the task has already been executed")

        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(urls))
        return self._task

    async def wait(self) -> Optional[Event]:
        """Await the published result."""
        if self._task is None:
            raise RuntimeError("Task has not been executed")
        return await self._task

    def discard(self) -> None:
        """The consumer went away; the result will be dropped."""
        self._discarded = True

    async def _run(self, urls) -> Optional[Event]:
        event = await asyncio.to_thread(self.do_in_background, *urls)

        # Back on the loop thread
        if self._discarded:
            logger.debug("Task discarded before completion, dropping result")
            return None

        self.on_post_execute(event)
        return event

    def do_in_background(self, *urls: Optional[str]) -> Optional[Event]:
        """Worker thread: perform the network request and parse the response."""
        if not urls or urls[0] is None:
            return None

        return self.connector.fetch_earthquake_data(urls[0])

    def on_post_execute(self, event: Optional[Event]) -> None:
        """Loop thread: hand the event to the consumer. No result, nothing to do."""
        if event is None:
            logger.info("No earthquake to display")
            return

        self.on_result(event)
