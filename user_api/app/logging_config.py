"""
Logging configuration.

Text output for development, one JSON object per line otherwise
(selected by the log_format setting).
"""
import json
import logging
import sys

from .config import AppSettings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Install a single stdout handler on the root logger."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == 'json':
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    # SQL echo is controlled by DB_ECHO_SQL, keep the engine logger quiet otherwise
    if not settings.database.echo_sql:
        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
