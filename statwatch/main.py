import asyncio
import sys

from statwatch.clients.stats import StatsClient
from statwatch.core.config import Config
from statwatch.core.exceptions import ConfigurationError
from statwatch.services.monitor import MonitorService
from statwatch.utils.logger import LoggerSetup


async def main(config: Config) -> None:
    """Run the monitor until its poller gives up"""
    logger = LoggerSetup.setup(__name__)

    client = StatsClient(config.poll.url, timeout=config.poll.request_timeout)
    service = MonitorService(
        source=client,
        poll_config=config.poll,
        thresholds=config.thresholds
    )

    await service.start()
    try:
        await service.run()
    finally:
        await service.stop()
        logger.info(service.get_service_status())


def run() -> None:
    """Console script entry point"""
    try:
        config = Config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    LoggerSetup.configure(config.logging)

    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
