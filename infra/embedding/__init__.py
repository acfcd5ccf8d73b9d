from .base import EmbeddingProvider
from .openai_embedding import OpenAIEmbeddingProvider, is_valid_vector

__all__ = ["EmbeddingProvider", "OpenAIEmbeddingProvider", "is_valid_vector"]
