import asyncio
import logging
import pytest

from statwatch import main as entry
from statwatch.core.config import Config, LogConfig
from statwatch.utils.logger import LoggerSetup


@pytest.mark.asyncio
async def test_main_exits_after_error_budget(monkeypatch, make_source, poll_config, capsys):
    source = make_source("95,1000,999,1000,999,1000,999")
    monkeypatch.setattr(entry, 'StatsClient', lambda url, timeout: source)

    monkeypatch.setattr('statwatch.core.config.load_dotenv', lambda: False)
    config = Config()
    config.poll = poll_config

    await asyncio.wait_for(entry.main(config), timeout=5)

    out = capsys.readouterr().out
    assert "Memory usage too high: 99%" in out
    source.cleanup.assert_awaited_once()

def test_run_reports_bad_configuration(monkeypatch, capsys):
    monkeypatch.setattr('statwatch.core.config.load_dotenv', lambda: False)
    monkeypatch.setenv('STATWATCH_MAX_ERRORS', '-1')

    with pytest.raises(SystemExit) as exc_info:
        entry.run()

    assert exc_info.value.code == 2
    assert "Configuration error" in capsys.readouterr().err

def test_logger_setup_adds_single_handler():
    logger = LoggerSetup.setup('statwatch.tests.single')
    LoggerSetup.setup('statwatch.tests.single')

    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.INFO

def test_logger_configure_updates_console_level():
    logger = LoggerSetup.setup('statwatch.tests.level')
    try:
        LoggerSetup.configure(LogConfig(level="debug"))
        assert logger.handlers[0].level == logging.DEBUG
    finally:
        LoggerSetup.configure(LogConfig())
    assert logger.handlers[0].level == logging.INFO
