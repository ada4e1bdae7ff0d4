import asyncio
from typing import AsyncIterator, Optional

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_none

from statwatch.core.config import PollConfig
from statwatch.core.enums import ServiceStatus
from statwatch.core.exceptions import PollError
from statwatch.core.protocols import StatsSource
from statwatch.utils.logger import LoggerSetup
from statwatch.utils.time import get_current_timestamp

# Marks the end of the payload sequence on the queue
_END_OF_STREAM = None


class Poller:
    """
    Background producer of raw metrics payloads.

    Features:
    - Fixed wait before every fetch attempt, the first one included
    - Consecutive-error budget: failures in a row end polling permanently,
      any success resets the count
    - Bounded hand-off queue that backpressures the fetch loop
    - Finite sequence: consumers see the end once polling stops
    """

    def __init__(self, source: StatsSource, config: PollConfig):
        self._source = source
        self._config = config
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue(maxsize=config.queue_size)
        self._task: Optional[asyncio.Task] = None
        self._stream_ended = False

        # Owned by the polling task only
        self._consecutive_errors = 0
        self._attempts = 0
        self._successes = 0
        self._failures = 0
        self._last_success: Optional[int] = None
        self._last_error: Optional[str] = None

        self._status = ServiceStatus.STOPPED
        self.logger = LoggerSetup.setup(__class__.__name__)

    @property
    def status(self) -> ServiceStatus:
        return self._status

    @property
    def consecutive_errors(self) -> int:
        return self._consecutive_errors

    async def start(self) -> None:
        """Start the polling task"""
        if self._task is not None:
            raise RuntimeError("Poller can only be started once")

        self._status = ServiceStatus.RUNNING
        self._task = asyncio.create_task(self._poll_loop())
        self.logger.info(
            f"Polling {self._config.url} every {self._config.poll_interval}s "
            f"(max {self._config.max_consecutive_errors} consecutive errors)"
        )

    async def stop(self) -> None:
        """Cancel the polling task and release the HTTP client"""
        if self._task and not self._task.done():
            self._status = ServiceStatus.STOPPING
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        if not self._stream_ended:
            self._end_stream_now()

        await self._source.cleanup()
        if self._status != ServiceStatus.EXHAUSTED:
            self._status = ServiceStatus.STOPPED

    async def payloads(self) -> AsyncIterator[str]:
        """Yield fetched payloads until polling stops"""
        while True:
            payload = await self._queue.get()
            if payload is _END_OF_STREAM:
                return
            yield payload

    async def _poll_loop(self) -> None:
        """Fetch until the error budget is exhausted, then end the sequence"""
        try:
            while True:
                try:
                    payload = await self._fetch_within_budget()
                except PollError:
                    self._status = ServiceStatus.EXHAUSTED
                    self.logger.error(
                        f"Exceeded max consecutive errors ({self._config.max_consecutive_errors}), "
                        f"stopping polling"
                    )
                    break

                await self._queue.put(payload)

        except Exception as e:
            self._status = ServiceStatus.ERROR
            self.logger.error(f"Polling stopped unexpectedly: {e}")

        await self._queue.put(_END_OF_STREAM)
        self._stream_ended = True

    def _end_stream_now(self) -> None:
        """Discard buffered payloads and wake consumers with the end marker"""
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(_END_OF_STREAM)
        self._stream_ended = True

    async def _fetch_within_budget(self) -> str:
        """
        Fetch one payload, retrying failed attempts until the budget runs out.

        Every call starts a fresh retry run, so a success resets the
        consecutive-error count.

        Raises:
            PollError: The last failure once the budget is exhausted
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._config.max_consecutive_errors),
            wait=wait_none(),
            retry=retry_if_exception_type(PollError),
            reraise=True
        )

        async for attempt in retrying:
            with attempt:
                payload = await self._attempt()

        self._consecutive_errors = 0
        self._successes += 1
        self._last_success = get_current_timestamp()
        return payload

    async def _attempt(self) -> str:
        await asyncio.sleep(self._config.poll_interval)
        self._attempts += 1

        try:
            return await self._source.fetch()
        except PollError as e:
            self._consecutive_errors += 1
            self._failures += 1
            self._last_error = str(e)
            self.logger.error(
                f"Poll attempt failed ({self._consecutive_errors}/"
                f"{self._config.max_consecutive_errors}): {e}"
            )
            raise

    def get_service_status(self) -> str:
        """Generate poller status report"""
        status_lines = [
            "Poller Status:",
            f"Status: {self._status.value}",
            f"Endpoint: {self._config.url}",
            f"Attempts: {self._attempts}",
            f"Successful: {self._successes}",
            f"Failed: {self._failures}",
            f"Consecutive errors: {self._consecutive_errors}/{self._config.max_consecutive_errors}",
        ]

        if self._last_success is not None:
            time_ago = (get_current_timestamp() - self._last_success) / 1000
            status_lines.append(f"Last success: {time_ago:.1f}s ago")

        if self._last_error:
            status_lines.append(f"Last error: {self._last_error}")

        return "\n".join(status_lines)
