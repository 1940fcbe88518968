"""
Agency strategy document ingestion and retrieval service.

Upload → extract → chunk → embed → index pipeline with project-scoped
retrieval and LLM answering on top.
"""

__version__ = "0.1.0"
