"""
S3 Vectors index for production ingestion and retrieval.

Talks to Amazon S3 Vectors through the boto3 "s3vectors" client. The
index must declare projectId as a filterable metadata key; text is
stored as non-filterable metadata.

Dependencies: boto3, botocore, agency_rag.boundary.vdb.vector_schemas
System role: Production vector index
"""

import logging
from typing import Any, Iterable

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from agency_rag.boundary.vdb.vector_schemas import ChunkVectorMetadata, VectorSearchResult
from agency_rag.core.exceptions import IndexUnavailableError

logger = logging.getLogger(__name__)

# Per-request key limits of the S3 Vectors API
DELETE_BATCH_SIZE = 500
GET_BATCH_SIZE = 100
MAX_TOP_K = 100


def _batched(keys: list[str], size: int) -> Iterable[list[str]]:
    for start in range(0, len(keys), size):
        yield keys[start : start + size]


class S3VectorsIndex:
    """
    Chunk vector index backed by Amazon S3 Vectors.

    All calls are blocking; callers on the event loop run them in a
    worker thread.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str = "documents",
        region: str = "us-east-1",
        client=None,
    ) -> None:
        """
        Initialize the S3 Vectors index client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
            client: Optional pre-built boto3 s3vectors client
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._client = client or boto3.client("s3vectors", region_name=region)

    def upsert(self, key: str, vector: list[float], metadata: ChunkVectorMetadata) -> None:
        """
        Write one vector, overwriting any vector with the same key.

        Args:
            key: Chunk key
            vector: Embedding
            metadata: Chunk metadata

        Raises:
            IndexUnavailableError: S3 Vectors call failed
        """
        try:
            self._client.put_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                vectors=[
                    {
                        "key": key,
                        "data": {"float32": [float(v) for v in vector]},
                        "metadata": metadata.to_index_metadata(),
                    }
                ],
            )
        except (ClientError, BotoCoreError) as e:
            raise IndexUnavailableError(f"Vector upsert failed: {e}", operation="upsert") from e

    def query(self, vector: list[float], project_id: str, top_k: int = 5) -> list[VectorSearchResult]:
        """
        Return the nearest chunks belonging to one project.

        Args:
            vector: Query embedding
            project_id: Project filter (required)
            top_k: Maximum number of results

        Returns:
            list[VectorSearchResult]: Results ordered by descending similarity

        Raises:
            ValueError: Empty project ID
            IndexUnavailableError: S3 Vectors call failed
        """
        if not project_id:
            raise ValueError("project_id is required for vector queries")

        try:
            response = self._client.query_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                topK=max(1, min(top_k, MAX_TOP_K)),
                queryVector={"float32": [float(v) for v in vector]},
                filter={"projectId": {"$eq": project_id}},
                returnMetadata=True,
                returnDistance=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise IndexUnavailableError(f"Vector query failed: {e}", operation="query") from e

        metric = str(response.get("distanceMetric", "cosine")).lower()
        results: list[VectorSearchResult] = []
        for item in response.get("vectors", []):
            try:
                metadata = ChunkVectorMetadata.model_validate(item.get("metadata") or {})
            except ValidationError:
                logger.warning(
                    f"{__name__}:query - Skipping vector with malformed metadata",
                    extra={"key": item.get("key")},
                )
                continue
            if metadata.project_id != project_id:
                continue
            results.append(
                VectorSearchResult(
                    key=item["key"],
                    score=_distance_to_similarity(float(item.get("distance", 0.0)), metric),
                    metadata=metadata,
                )
            )

        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]

    def delete(self, keys: list[str]) -> None:
        """
        Delete vectors by key; absent keys are ignored.

        Raises:
            IndexUnavailableError: S3 Vectors call failed
        """
        try:
            for batch in _batched(keys, DELETE_BATCH_SIZE):
                self._client.delete_vectors(
                    vectorBucketName=self._vectors_bucket,
                    indexName=self._index_name,
                    keys=batch,
                )
        except (ClientError, BotoCoreError) as e:
            raise IndexUnavailableError(f"Vector delete failed: {e}", operation="delete") from e

    def existing_keys(self, keys: list[str]) -> set[str]:
        """
        Return which of the given keys are present in the index.

        Raises:
            IndexUnavailableError: S3 Vectors call failed
        """
        found: set[str] = set()
        try:
            for batch in _batched(keys, GET_BATCH_SIZE):
                response: dict[str, Any] = self._client.get_vectors(
                    vectorBucketName=self._vectors_bucket,
                    indexName=self._index_name,
                    keys=batch,
                    returnData=False,
                    returnMetadata=False,
                )
                found.update(v["key"] for v in response.get("vectors", []))
        except (ClientError, BotoCoreError) as e:
            raise IndexUnavailableError(f"Vector lookup failed: {e}", operation="get") from e
        return found


def _distance_to_similarity(distance: float, metric: str) -> float:
    if metric == "euclidean":
        return 1.0 / (1.0 + distance)
    return 1.0 - distance
