"""HTTP API for document processing, status, summaries and project queries."""
