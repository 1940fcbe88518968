"""Status persistence for the ingestion pipeline."""

from .document_status_updater import DocumentStatusUpdater

__all__ = ["DocumentStatusUpdater"]
