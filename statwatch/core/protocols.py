from typing import Protocol


class Service(Protocol):
    """
    Base class for long-running components.

    Features:
    - Service lifecycle (start/stop)
    - Status reporting
    """
    async def start(self) -> None:
        """
        Start the service.

        Each service must implement its startup logic:
        - Initialize resources
        - Start background tasks
        """
        ...

    async def stop(self) -> None:
        """
        Stop the service.

        Each service must implement its cleanup logic:
        - Cancel background tasks
        - Close connections
        """
        ...

    def get_service_status(self) -> str:
        """
        Generate detailed service status report.

        Returns:
            str: Multi-line status report including:
                - Service state
                - Counters
                - Error counts
        """
        ...


class StatsSource(Protocol):
    """Anything that can perform one fetch of the raw metrics payload"""

    async def fetch(self) -> str:
        """
        Perform a single fetch attempt.

        Raises:
            PollError: If the attempt failed for any reason
        """
        ...

    async def cleanup(self) -> None:
        """Cleanup resources"""
        ...
