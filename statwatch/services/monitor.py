import sys
from typing import Optional, TextIO

from statwatch.core.config import PollConfig, ThresholdConfig
from statwatch.core.enums import ServiceStatus
from statwatch.core.exceptions import ParseError
from statwatch.core.protocols import Service, StatsSource
from statwatch.utils.logger import LoggerSetup
from statwatch.utils.time import format_uptime, get_current_timestamp
from .evaluator import AlertEvaluator
from .parser import parse_snapshot
from .poller import Poller


class MonitorService(Service):
    """
    Single-server resource monitor.

    Pulls payloads from the poller, turns each into a snapshot and evaluates
    it once. Alert lines go to the output stream; parse failures are logged
    and the cycle is skipped. The service ends on its own once the poller
    has exhausted its error budget.
    """

    def __init__(self,
                 source: StatsSource,
                 poll_config: PollConfig,
                 thresholds: Optional[ThresholdConfig] = None,
                 output: Optional[TextIO] = None):

        self.poller = Poller(source, poll_config)
        self.evaluator = AlertEvaluator(thresholds)
        self._output = output

        # Service state
        self._status = ServiceStatus.STOPPED
        self._start_time = get_current_timestamp()
        self._snapshots = 0
        self._parse_errors = 0
        self._alerts = 0

        self.logger = LoggerSetup.setup(__class__.__name__)

    @property
    def status(self) -> ServiceStatus:
        return self._status

    async def start(self) -> None:
        """Start polling"""
        try:
            self._status = ServiceStatus.STARTING
            self.logger.info("Starting monitor service")

            self._start_time = get_current_timestamp()
            await self.poller.start()

            self._status = ServiceStatus.RUNNING
            self.logger.info("Monitor service started successfully")

        except Exception as e:
            self._status = ServiceStatus.ERROR
            self.logger.error(f"Failed to start monitor service: {e}")
            raise

    async def stop(self) -> None:
        """Stop polling and release resources"""
        try:
            self._status = ServiceStatus.STOPPING
            self.logger.info("Stopping monitor service")

            await self.poller.stop()

            self._status = ServiceStatus.STOPPED
            self.logger.info("Monitor service stopped successfully")

        except Exception as e:
            self._status = ServiceStatus.ERROR
            self.logger.error(f"Error stopping monitor service: {e}")
            raise

    async def run(self) -> None:
        """Consume payloads until the poller ends its sequence"""
        async for payload in self.poller.payloads():
            self.process_payload(payload)

        self.logger.info("Payload stream ended, monitor finished")

    def process_payload(self, payload: str) -> int:
        """
        Parse and evaluate one payload.

        Returns:
            int: Number of alert lines written
        """
        try:
            snapshot = parse_snapshot(payload)
        except ParseError as e:
            self._parse_errors += 1
            self.logger.error(f"Error parsing metrics: {e}")
            return 0

        self._snapshots += 1
        alerts = self.evaluator.evaluate(snapshot)

        output = self._output or sys.stdout
        for alert in alerts:
            output.write(f"{alert}\n")
        output.flush()

        self._alerts += len(alerts)
        return len(alerts)

    def get_service_status(self) -> str:
        """
        Generate detailed service status report.

        Returns:
            str: Multi-line status report including:
                - Service state
                - Snapshot and alert counters
                - Poller state and error counts
        """
        status_lines = [
            "Monitor Service Status:",
            f"Status: {self._status.value}",
            f"Uptime: {format_uptime(get_current_timestamp() - self._start_time)}",
            "",
            "Evaluation:",
            f"  Snapshots evaluated: {self._snapshots}",
            f"  Parse errors: {self._parse_errors}",
            f"  Alerts emitted: {self._alerts}",
            "",
        ]
        status_lines.extend(self.poller.get_service_status().splitlines())

        return "\n".join(status_lines)
