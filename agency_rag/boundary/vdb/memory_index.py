"""
In-process FAISS vector index for local development and tests.

Vectors are L2-normalized into an inner-product FAISS index, so search
scores are cosine similarities. Mirrors the S3VectorsIndex interface,
including the mandatory project filter.

Dependencies: faiss, numpy, agency_rag.boundary.vdb.vector_schemas
System role: Development vector index
"""

import threading
from typing import Optional

import faiss
import numpy as np

from agency_rag.boundary.vdb.vector_schemas import ChunkVectorMetadata, VectorSearchResult


def _as_matrix(vector: list[float], dim: int) -> np.ndarray:
    """One normalized float32 row; zero vectors stay zero."""
    if len(vector) != dim:
        raise ValueError(f"Vector dimension mismatch: index has dim={dim}, got {len(vector)}")
    matrix = np.asarray([vector], dtype="float32")
    faiss.normalize_L2(matrix)
    return matrix


class InMemoryVectorIndex:
    """
    FAISS IndexIDMap2 over IndexFlatIP plus a key -> metadata map.

    The dimension is fixed by the first upsert. Re-upserting a key replaces
    its vector.
    """

    def __init__(self) -> None:
        self._index: Optional[faiss.IndexIDMap2] = None
        self._dim: Optional[int] = None
        self._ids: dict[str, int] = {}
        self._entries: dict[int, tuple[str, ChunkVectorMetadata]] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def _ensure_index(self, dim: int) -> faiss.IndexIDMap2:
        if self._index is None:
            self._dim = dim
            self._index = faiss.IndexIDMap2(faiss.IndexFlatIP(dim))
        return self._index

    def _remove(self, key: str) -> None:
        vector_id = self._ids.pop(key, None)
        if vector_id is None:
            return
        self._index.remove_ids(np.asarray([vector_id], dtype="int64"))
        del self._entries[vector_id]

    def upsert(self, key: str, vector: list[float], metadata: ChunkVectorMetadata) -> None:
        with self._lock:
            index = self._ensure_index(len(vector))
            matrix = _as_matrix(vector, self._dim)
            self._remove(key)

            vector_id = self._next_id
            self._next_id += 1
            index.add_with_ids(matrix, np.asarray([vector_id], dtype="int64"))
            self._ids[key] = vector_id
            self._entries[vector_id] = (key, metadata)

    def query(self, vector: list[float], project_id: str, top_k: int = 5) -> list[VectorSearchResult]:
        if not project_id:
            raise ValueError("project_id is required for vector queries")
        if top_k <= 0:
            return []

        with self._lock:
            if self._index is None or self._index.ntotal == 0:
                return []
            matrix = _as_matrix(vector, self._dim)
            # Project filter runs after search, so rank the whole index.
            scores, ids = self._index.search(matrix, self._index.ntotal)

            results = []
            for vector_id, score in zip(ids[0], scores[0]):
                if vector_id < 0:
                    continue
                key, metadata = self._entries[int(vector_id)]
                if metadata.project_id != project_id:
                    continue
                results.append(VectorSearchResult(key=key, score=float(score), metadata=metadata))
                if len(results) == top_k:
                    break
        return results

    def delete(self, keys: list[str]) -> None:
        with self._lock:
            if self._index is None:
                return
            for key in keys:
                self._remove(key)

    def existing_keys(self, keys: list[str]) -> set[str]:
        with self._lock:
            return {key for key in keys if key in self._ids}

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
