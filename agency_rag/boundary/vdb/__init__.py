"""Vector index boundary: S3 Vectors (prod) and in-process (dev) backends."""

from agency_rag.boundary.vdb.memory_index import InMemoryVectorIndex
from agency_rag.boundary.vdb.s3_vectors_index import S3VectorsIndex
from agency_rag.boundary.vdb.vector_index_factory import get_vector_index
from agency_rag.boundary.vdb.vector_schemas import ChunkVectorMetadata, VectorSearchResult

__all__ = [
    "ChunkVectorMetadata",
    "InMemoryVectorIndex",
    "S3VectorsIndex",
    "VectorSearchResult",
    "get_vector_index",
]
