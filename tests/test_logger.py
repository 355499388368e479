import logging

from logger import ConsoleFormatter, get_log_path, get_logger, setup_logging


def _record(level, message):
    return logging.LogRecord("tally", level, __file__, 1, message, None, None)


class TestConsoleFormatter:
    """Tests for the console output format."""

    def test_info_is_plain(self):
        """Test command output is printed without a level prefix."""
        formatter = ConsoleFormatter()

        assert formatter.format(_record(logging.INFO, "Balance Alice: 40")) == (
            "Balance Alice: 40"
        )

    def test_warning_is_prefixed(self):
        """Test warnings keep their level name."""
        formatter = ConsoleFormatter()

        assert formatter.format(_record(logging.WARNING, "Skipping line 3")) == (
            "WARNING - Skipping line 3"
        )


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_dated_log_file(self, test_config):
        """Test messages reach today's log file under log_dir."""
        logger = setup_logging(test_config)
        try:
            get_logger().info("Account Eve added")
            for handler in logger.handlers:
                handler.flush()

            log_path = get_log_path(test_config)
            assert log_path.parent == test_config.log_dir
            assert log_path.name.startswith("tally-")
            assert "INFO - Account Eve added" in log_path.read_text()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

    def test_repeated_setup_replaces_handlers(self, test_config):
        """Test calling setup twice does not duplicate output."""
        setup_logging(test_config)
        logger = setup_logging(test_config)
        try:
            assert len(logger.handlers) == 2
            assert isinstance(logger.handlers[1].formatter, ConsoleFormatter)
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
