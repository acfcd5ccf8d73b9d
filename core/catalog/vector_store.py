"""
商品向量存储

在存储库之上管理会话与事务边界，每个操作使用独立会话；
单条upsert依赖数据库的行级原子性，不跨商品持有事务。
"""

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from libs.exceptions import StoreException
from models import Product, ProductWithSimilarity
from repositories import ProductRepository
from utils import get_component_logger

logger = get_component_logger(__name__, "ProductVectorStore")

STORE_ERRORS = (SQLAlchemyError, OSError, TimeoutError)


class ProductVectorStore:
    """基于 PostgreSQL + pgvector 的商品向量存储"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def upsert(self, product: Product, embedding: Sequence[float]) -> None:
        """
        按 external_id 写入或更新商品

        异常:
            StoreException: 连接或约束错误
        """
        try:
            async with self.session_factory() as session:
                await ProductRepository.upsert(product, embedding, session)
                await session.commit()
        except STORE_ERRORS as e:
            raise StoreException("upsert", str(e)) from e

    async def find_by_similarity(self, embedding: Sequence[float], limit: int) -> list[ProductWithSimilarity]:
        """返回与向量最相近的 limit 个商品，相似度非递增"""
        try:
            async with self.session_factory() as session:
                return await ProductRepository.find_by_similarity(embedding, limit, session)
        except STORE_ERRORS as e:
            raise StoreException("find_by_similarity", str(e)) from e

    async def find_by_ids(self, ids: Sequence[str]) -> list[Product]:
        if not ids:
            return []
        try:
            async with self.session_factory() as session:
                return await ProductRepository.find_by_ids(ids, session)
        except STORE_ERRORS as e:
            raise StoreException("find_by_ids", str(e)) from e

    async def find_by_category(self, category: str) -> list[Product]:
        try:
            async with self.session_factory() as session:
                return await ProductRepository.find_by_category(category, session)
        except STORE_ERRORS as e:
            raise StoreException("find_by_category", str(e)) from e

    async def count(self) -> int:
        try:
            async with self.session_factory() as session:
                return await ProductRepository.count(session)
        except STORE_ERRORS as e:
            raise StoreException("count", str(e)) from e
