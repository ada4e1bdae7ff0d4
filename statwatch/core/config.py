from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_STATS_URL = "http://srv.msk01.gigacorp.local/_stats"

@dataclass
class PollConfig:
    """
    Polling configuration for the statistics endpoint

    Attributes:
        url: Endpoint returning the comma-separated metrics payload
        max_consecutive_errors: Failed fetches in a row tolerated before polling stops
        request_timeout: Seconds allowed for a single HTTP request
        poll_interval: Seconds to wait before every fetch attempt
        queue_size: Payloads buffered between poller and evaluator
    """
    url: str = DEFAULT_STATS_URL
    max_consecutive_errors: int = 3
    request_timeout: float = 5.0
    poll_interval: float = 0.5
    queue_size: int = 3

    def __post_init__(self) -> None:
        """Validate polling configuration"""
        if not self.url:
            raise ConfigurationError("Stats endpoint URL must be specified")
        if self.max_consecutive_errors <= 0:
            raise ConfigurationError("Max consecutive errors must be positive")
        if self.request_timeout <= 0:
            raise ConfigurationError("Request timeout must be positive")
        if self.poll_interval < 0:
            raise ConfigurationError("Poll interval cannot be negative")
        if self.queue_size <= 0:
            raise ConfigurationError("Queue size must be positive")

@dataclass
class ThresholdConfig:
    """Alert thresholds in percent; a resource alerts when its usage is strictly above"""
    cpu: int = 30
    memory: int = 80
    disk: int = 90
    network: int = 90

    def __post_init__(self) -> None:
        """Validate thresholds"""
        for name in ('cpu', 'memory', 'disk', 'network'):
            value = getattr(self, name)
            if value < 0 or value > 100:
                raise ConfigurationError(f"Invalid {name} threshold: {value} (must be between 0 and 100)")

@dataclass
class LogConfig:
    """Logging configuration"""
    level: str = "INFO"
    directory: Optional[str] = None  # None disables file logging
    max_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate logging configuration"""
        if self.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigurationError(f"Invalid log level '{self.level}'")
        if self.max_size <= 0:
            raise ConfigurationError("Log file size must be positive")
        if self.backup_count < 0:
            raise ConfigurationError("Backup count cannot be negative")

class Config:
    """Application configuration"""

    def __init__(self):
        # Load environment variables
        load_dotenv()

        # Initialize components
        self.poll = self._init_poll_config()
        self.thresholds = self._init_threshold_config()
        self.logging = self._init_log_config()

    def _init_poll_config(self) -> PollConfig:
        """Initialize polling configuration"""
        try:
            return PollConfig(
                url=os.getenv('STATWATCH_URL', DEFAULT_STATS_URL),
                max_consecutive_errors=int(os.getenv('STATWATCH_MAX_ERRORS', '3')),
                request_timeout=float(os.getenv('STATWATCH_TIMEOUT', '5')),
                poll_interval=float(os.getenv('STATWATCH_POLL_INTERVAL', '0.5')),
                queue_size=int(os.getenv('STATWATCH_QUEUE_SIZE', '3'))
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid polling configuration: {e}")

    def _init_threshold_config(self) -> ThresholdConfig:
        """Initialize alert thresholds"""
        try:
            return ThresholdConfig(
                cpu=int(os.getenv('STATWATCH_THRESHOLD_CPU', '30')),
                memory=int(os.getenv('STATWATCH_THRESHOLD_MEMORY', '80')),
                disk=int(os.getenv('STATWATCH_THRESHOLD_DISK', '90')),
                network=int(os.getenv('STATWATCH_THRESHOLD_NETWORK', '90'))
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid threshold configuration: {e}")

    def _init_log_config(self) -> LogConfig:
        """Initialize logging configuration"""
        try:
            return LogConfig(
                level=os.getenv('LOG_LEVEL', 'INFO'),
                directory=os.getenv('LOG_DIR') or None,
                max_size=int(os.getenv('LOG_MAX_SIZE', str(10 * 1024 * 1024))),
                backup_count=int(os.getenv('LOG_BACKUP_COUNT', '5'))
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid logging configuration: {e}")
