"""
Models for document processing pipeline.

Exports: Chunk, PipelineResult, ProcessingStatus, DocumentCreatedEvent
"""

from .chunk import Chunk
from .document_event import DocumentCreatedEvent
from .pipeline_result import PipelineResult, ProcessingStatus

__all__ = [
    "Chunk",
    "DocumentCreatedEvent",
    "PipelineResult",
    "ProcessingStatus",
]
