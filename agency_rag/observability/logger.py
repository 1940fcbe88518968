"""
Logging setup for the API and the ingestion Lambda.

Every record carries the active correlation ID. Values passed through
extra={...} (document_id, project_id, chunk_count, ...) are appended to
the message as key=value pairs so they survive in plain-text log sinks
such as CloudWatch.

Dependencies: logging (stdlib), agency_rag.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from agency_rag.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"
NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "httpx", "httpcore", "google")

# Attributes every LogRecord has; anything else came from extra={...}.
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "correlation_id",
}


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the bound correlation ID ('-' when none)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends extra={...} fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return line
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{line} | {rendered}"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stdout handler on the root logger.

    Safe to call repeatedly (warm Lambda containers, app factory in tests):
    existing root handlers are replaced.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(ExtraFieldsFormatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
