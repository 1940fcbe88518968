"""
Boundary layer: adapters for the document database, object storage and
the vector index.
"""
