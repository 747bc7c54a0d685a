import logging
import sys


class _BelowErrorFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


class Log:
    """Centralized logging: progress to stdout, failures to stderr.

    Run outcomes (skip notice, final summary) go through a child logger pinned
    at INFO, so they reach stdout whatever LOG_LEVEL is configured.
    """

    _logger: logging.Logger = logging.getLogger("fake-names")
    _summary_logger: logging.Logger = logging.getLogger("fake-names.summary")
    _FORMAT = "[fake-names] %(message)s"

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout/stderr handlers."""
        cls._logger.setLevel(log_level.upper())
        cls._summary_logger.setLevel(logging.INFO)
        if not cls._logger.handlers:
            formatter = logging.Formatter(cls._FORMAT)

            out_handler = logging.StreamHandler(sys.stdout)
            out_handler.setFormatter(formatter)
            out_handler.addFilter(_BelowErrorFilter())
            cls._logger.addHandler(out_handler)

            err_handler = logging.StreamHandler(sys.stderr)
            err_handler.setFormatter(formatter)
            err_handler.setLevel(logging.ERROR)
            cls._logger.addHandler(err_handler)

    @classmethod
    def summary(cls, message: str) -> None:
        """Log a run outcome line; not affected by the configured level."""
        cls._summary_logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log an error message."""
        cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log a debug message."""
        cls._logger.debug(message)
