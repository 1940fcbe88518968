"""
Task modules for document processing pipeline.

Exports: ExtractionTask, ChunkingTask, EmbeddingTask, VectorStoreTask
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask, FixedDimensionEmbeddings, build_embeddings
from .extraction_task import ExtractionTask
from .vector_store_task import VectorStoreTask, chunk_key, chunk_keys

__all__ = [
    "ExtractionTask",
    "ChunkingTask",
    "EmbeddingTask",
    "FixedDimensionEmbeddings",
    "build_embeddings",
    "VectorStoreTask",
    "chunk_key",
    "chunk_keys",
]
