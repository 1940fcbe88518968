"""
Vector index factory for selecting between the in-process index (dev)
and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE.

Dependencies: agency_rag.boundary.vdb, agency_rag.configs
System role: Vector index instantiation and selection
"""

import logging

from agency_rag.boundary.vdb.memory_index import InMemoryVectorIndex
from agency_rag.boundary.vdb.s3_vectors_index import S3VectorsIndex
from agency_rag.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def get_vector_index(settings: VectorStoreSettings):
    """
    Build the vector index selected by configuration.

    Args:
        settings: Vector store settings

    Returns:
        InMemoryVectorIndex or S3VectorsIndex

    Raises:
        ValueError: If store_type is not 'memory' or 's3'
    """
    store_type = settings.store_type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:get_vector_index - Creating in-memory vector index (local dev mode)")
        return InMemoryVectorIndex()

    if store_type == "s3":
        logger.info(
            f"{__name__}:get_vector_index - Creating S3 Vectors index",
            extra={"bucket": settings.vectors_bucket, "index": settings.index_name},
        )
        return S3VectorsIndex(
            vectors_bucket=settings.vectors_bucket,
            index_name=settings.index_name,
            region=settings.aws_region,
        )

    raise ValueError(f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. Must be 'memory' or 's3'")
