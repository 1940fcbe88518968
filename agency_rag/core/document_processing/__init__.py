"""
Document processing pipeline for ingestion.

Fetch, extract, chunk, embed and index one document, tracking its status
on the document record.

Dependencies: pypdf, python-docx, openpyxl, langchain_google_genai, boto3, sqlalchemy
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import DocumentPipeline
from .models import Chunk, DocumentCreatedEvent, PipelineResult, ProcessingStatus

__all__ = [
    "DocumentPipeline",
    "Chunk",
    "DocumentCreatedEvent",
    "PipelineResult",
    "ProcessingStatus",
]
