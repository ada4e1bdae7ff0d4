import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from statwatch.core.config import PollConfig, ThresholdConfig  # noqa: E402
from statwatch.core.exceptions import TransportError  # noqa: E402
from statwatch.utils.logger import LoggerSetup  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_loggers():
    """Create service loggers once, bound to the session's stderr"""
    for name in ('StatsClient', 'Poller', 'AlertEvaluator', 'MonitorService', 'statwatch.main'):
        LoggerSetup.setup_test_logger(name)

@pytest.fixture
def poll_config():
    """Polling configuration without waits between attempts"""
    return PollConfig(
        url="http://stats.test/_stats",
        max_consecutive_errors=3,
        request_timeout=1.0,
        poll_interval=0,
        queue_size=3
    )

@pytest.fixture
def thresholds():
    return ThresholdConfig()

@pytest.fixture
def make_source():
    """
    Build a fake stats source from a script of outcomes.

    Strings are returned as payloads, exceptions are raised. Once the script
    runs out every further fetch fails with a transport error.
    """
    def _make(*outcomes):
        script = list(outcomes)

        async def fetch():
            if not script:
                raise TransportError("connection refused")
            outcome = script.pop(0)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        source = AsyncMock()
        source.fetch.side_effect = fetch
        return source

    return _make
