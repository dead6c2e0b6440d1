"""
Logging configuration for apiharness

Provides structured logging with optional file output and console output.
The library itself only emits DEBUG records; test suites decide where they go.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class HarnessLogger:
    """Package logger with a request log file and an optional console echo"""

    def __init__(
        self,
        name: str = "apiharness",
        log_file: Path | None = None,
        console_output: bool = True,
        level: int = logging.DEBUG,
        console_level: int = logging.INFO,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "apiharness" for the package logger)
            log_file: Request log file (optional)
            console_output: Whether to echo to stdout
            level: Lowest level written to the request log. DEBUG records every
                   request and status; INFO keeps only warnings from config loading.
            console_level: Lowest level echoed to stdout
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(min(level, console_level) if console_output else level)

        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers = []

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        if console_output:
            self._add_handler(logging.StreamHandler(sys.stdout), console_level, formatter)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._add_handler(
                logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter
            )

    def _add_handler(
        self, handler: logging.Handler, level: int, formatter: logging.Formatter
    ) -> None:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(
    log_file: Path | None = None, verbose: bool = True, level: int = logging.DEBUG
) -> logging.Logger:
    """
    Setup logging for a test run

    Args:
        log_file: Where to write the request log (e.g. reports/api.log)
        verbose: Whether to also print INFO and above to console
        level: Lowest level written to log_file

    Returns:
        Configured package logger
    """
    return HarnessLogger(
        name="apiharness", log_file=log_file, console_output=verbose, level=level
    ).get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'api_client', 'config')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"apiharness.{module_name}")
