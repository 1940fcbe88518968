"""
Observability module.

Logging configuration, correlation IDs and request middleware shared by
the API and the ingestion Lambda.
"""

from agency_rag.observability.correlation import correlation_scope, get_correlation_id
from agency_rag.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
]
