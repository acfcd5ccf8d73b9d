from .vector_store import ProductVectorStore
from .ingestion import CatalogIngestionPipeline, build_embedding_text
from .search import ProductSearchService

__all__ = [
    "ProductVectorStore",
    "CatalogIngestionPipeline",
    "build_embedding_text",
    "ProductSearchService",
]
