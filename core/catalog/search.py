"""
相似度检索服务

将查询文本转换为向量后在向量存储中做最近邻检索。
limit 的范围由调用方负责校验。
"""

from infra.embedding import EmbeddingProvider
from models import ProductWithSimilarity
from utils import get_component_logger
from .vector_store import ProductVectorStore

logger = get_component_logger(__name__, "ProductSearch")


class ProductSearchService:
    """商品相似度检索"""

    def __init__(self, embedder: EmbeddingProvider, store: ProductVectorStore):
        self.embedder = embedder
        self.store = store

    async def search(self, query: str, limit: int) -> list[ProductWithSimilarity]:
        """
        按查询文本检索最相近的商品

        参数:
            query: 查询文本
            limit: 返回数量

        返回:
            list[ProductWithSimilarity]: 按相似度非递增排列的商品

        异常:
            EmbeddingException: 查询文本嵌入失败
            StoreException: 向量检索失败
        """
        logger.debug(f"相似度检索: query={query[:50]}, limit={limit}")
        embedding = await self.embedder.embed(query)
        results = await self.store.find_by_similarity(embedding, limit)

        if not results:
            logger.warning(f"相似度检索无结果: query={query[:50]}")
        return results
