import pytest

from statwatch.core.config import (
    DEFAULT_STATS_URL,
    Config,
    LogConfig,
    PollConfig,
    ThresholdConfig
)
from statwatch.core.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate tests from the developer's environment and .env file"""
    for name in (
        'STATWATCH_URL', 'STATWATCH_MAX_ERRORS', 'STATWATCH_TIMEOUT',
        'STATWATCH_POLL_INTERVAL', 'STATWATCH_QUEUE_SIZE',
        'STATWATCH_THRESHOLD_CPU', 'STATWATCH_THRESHOLD_MEMORY',
        'STATWATCH_THRESHOLD_DISK', 'STATWATCH_THRESHOLD_NETWORK',
        'LOG_LEVEL', 'LOG_DIR', 'LOG_MAX_SIZE', 'LOG_BACKUP_COUNT',
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr('statwatch.core.config.load_dotenv', lambda: False)
    return monkeypatch

def test_defaults(clean_env):
    config = Config()

    assert config.poll.url == DEFAULT_STATS_URL
    assert config.poll.max_consecutive_errors == 3
    assert config.poll.request_timeout == 5.0
    assert config.poll.poll_interval == 0.5
    assert config.poll.queue_size == 3
    assert (config.thresholds.cpu, config.thresholds.memory,
            config.thresholds.disk, config.thresholds.network) == (30, 80, 90, 90)
    assert config.logging.level == "INFO"
    assert config.logging.directory is None

def test_environment_overrides(clean_env):
    clean_env.setenv('STATWATCH_URL', 'http://localhost:8080/_stats')
    clean_env.setenv('STATWATCH_MAX_ERRORS', '5')
    clean_env.setenv('STATWATCH_POLL_INTERVAL', '2')
    clean_env.setenv('STATWATCH_THRESHOLD_CPU', '75')
    clean_env.setenv('LOG_DIR', '/tmp/statwatch-logs')

    config = Config()

    assert config.poll.url == 'http://localhost:8080/_stats'
    assert config.poll.max_consecutive_errors == 5
    assert config.poll.poll_interval == 2.0
    assert config.thresholds.cpu == 75
    assert config.logging.directory == '/tmp/statwatch-logs'

@pytest.mark.parametrize("name, value", [
    ('STATWATCH_MAX_ERRORS', 'three'),
    ('STATWATCH_MAX_ERRORS', '0'),
    ('STATWATCH_TIMEOUT', '-1'),
    ('STATWATCH_QUEUE_SIZE', '0'),
    ('STATWATCH_THRESHOLD_DISK', '101'),
    ('LOG_LEVEL', 'LOUD'),
])
def test_invalid_environment(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ConfigurationError):
        Config()

def test_dataclass_validation():
    with pytest.raises(ConfigurationError):
        PollConfig(url="")
    with pytest.raises(ConfigurationError):
        PollConfig(poll_interval=-0.1)
    with pytest.raises(ConfigurationError):
        ThresholdConfig(memory=-1)
    with pytest.raises(ConfigurationError):
        LogConfig(backup_count=-1)

    assert ThresholdConfig(cpu=0, memory=100).memory == 100
