"""
Correlation IDs for log lines.

An HTTP request is traced by its X-Correlation-ID header (or a fresh
UUID); a queue record is traced by the document ID it carries. The ID is
bound for the duration of a correlation_scope and read by the log filter.

Dependencies: contextvars
System role: Request and record tracing across async boundaries
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Correlation ID bound in the current context, if any."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID until the block exits.

    Args:
        correlation_id: ID to bind (a UUID4 is generated when empty)

    Yields:
        str: The bound correlation ID

    Usage:
        with correlation_scope(document_id):
            await pipeline.process(document_id)
    """
    value = correlation_id or str(uuid.uuid4())
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
