import os
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from statwatch.core.config import LogConfig

class LoggerSetup:
    """
    Centralized logging configuration for the statwatch monitor.
    Provides consistent logging across all modules with console and optional file output.
    """
    _initialized = False
    _logs_dir: Optional[str] = None
    _level = logging.INFO
    _max_size = 10 * 1024 * 1024
    _backup_count = 5
    _loggers: set[str] = set()

    @classmethod
    def configure(cls, config: LogConfig) -> None:
        """
        Apply logging configuration to future and already created loggers.

        Args:
            config: Logging settings (console level, optional file directory)
        """
        cls._level = logging.getLevelName(config.level.upper())
        cls._logs_dir = config.directory
        cls._max_size = config.max_size
        cls._backup_count = config.backup_count

        for name in cls._loggers:
            cls.update_log_level(name, console_level=cls._level)

    @classmethod
    def _get_log_path(cls, name: str) -> str:
        """
        Generate a log file path based on the name.
        For module paths (contains dots), uses the last component.
        For class names (no dots), uses the name as is.

        Args:
            name: Name to create log file for (module path or class name)
        Returns:
            str: Path for the log file
        """
        if '.' in name:
            filename = f"{name.split('.')[-1]}.log"
        else:
            filename = f"{name}.log"

        return os.path.join(cls._logs_dir or '', filename)

    @classmethod
    def setup(cls, name: str) -> logging.Logger:
        """
        Set up and return a logger.
        Automatically handles both module paths and class names.

        Args:
            name: Logger name (__name__ for modules or __class__.__name__ for classes)
        Returns:
            logging.Logger: Configured logger instance
        Example:
            # For module-level logging:
            logger = LoggerSetup.setup(__name__)

            # For class-level logging:
            logger = LoggerSetup.setup(__class__.__name__)
            # Creates Poller.log when a log directory is configured
        """
        # Get or create logger
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        cls._loggers.add(name)

        # Avoid adding handlers multiple times
        if not logger.handlers:
            # Console handler for important logs (INFO and above by default)
            console_handler = logging.StreamHandler()
            console_handler.setLevel(cls._level)
            console_formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(console_formatter)
            logger.addHandler(console_handler)

            # Only add file handler if configured and not in test environment
            if cls._logs_dir and "pytest" not in sys.modules:
                try:
                    debug_log_file = cls._get_log_path(name)
                    os.makedirs(os.path.dirname(debug_log_file) or '.', exist_ok=True)

                    # File handler for debug logs with rotation
                    file_handler = RotatingFileHandler(
                        debug_log_file,
                        maxBytes=cls._max_size,
                        backupCount=cls._backup_count,
                        encoding='utf-8'
                    )
                    file_handler.setLevel(logging.DEBUG)
                    file_formatter = logging.Formatter(
                        '%(asctime)s - %(threadName)s - %(levelname)s - [%(name)s] - %(message)s'
                    )
                    file_handler.setFormatter(file_formatter)
                    logger.addHandler(file_handler)
                except (PermissionError, OSError) as e:
                    # Log to console if file logging fails
                    console_handler.setLevel(logging.DEBUG)
                    logger.warning(f"Could not set up file logging: {str(e)}")

        # Set up global logging configuration if not already done
        if not cls._initialized:
            # Quiet noisy loggers
            logging.getLogger('aiohttp').setLevel(logging.WARNING)
            logging.getLogger('urllib3').setLevel(logging.WARNING)
            cls._initialized = True

        return logger

    @classmethod
    def update_log_level(cls, name: str,
                        console_level: int | None = None,
                        file_level: int | None = None) -> None:
        """
        Update log levels for an existing logger.
        Args:
            name: Name of the logger
            console_level: New console handler log level (if None, level remains unchanged)
            file_level: New file handler log level (if None, level remains unchanged)
        """
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if isinstance(handler, RotatingFileHandler):
                if file_level is not None:
                    handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                if console_level is not None:
                    handler.setLevel(console_level)

    @classmethod
    def setup_test_logger(cls, name: str) -> logging.Logger:
        """
        Set up a simplified logger for testing environments.
        Args:
            name: Logger name
        Returns:
            logging.Logger: Configured test logger instance
        """
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        cls._loggers.add(name)

        if not logger.handlers:
            # Console handler with debug level for tests
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(levelname)s - %(message)s')
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        return logger
