"""
商品目录服务模块

为HTTP层和脚本提供目录同步、相似度检索和目录查询功能，
并负责边界参数校验。
"""

import asyncio
from typing import Optional

from core.catalog import CatalogIngestionPipeline, ProductSearchService, ProductVectorStore
from infra.ecommerce import CatalogSource
from libs.exceptions import (
    CatalogSyncInProgressException,
    CatalogValidationException,
    InvalidSearchLimitException,
)
from models import IngestionResult, Product, ProductWithSimilarity, SalesChannel
from utils import get_component_logger

logger = get_component_logger(__name__, "CatalogService")


class CatalogService:
    """
    商品目录服务类

    同一进程内同时只允许一次目录同步。
    """

    MIN_SEARCH_LIMIT = 1

    def __init__(
        self,
        pipeline: CatalogIngestionPipeline,
        search_service: ProductSearchService,
        store: ProductVectorStore,
        source: CatalogSource,
        default_limit: int = 10,
        max_limit: int = 100,
    ):
        self.pipeline = pipeline
        self.search_service = search_service
        self.store = store
        self.source = source
        self.default_limit = default_limit
        self.max_limit = max_limit
        self._sync_lock = asyncio.Lock()

    @property
    def is_syncing(self) -> bool:
        return self._sync_lock.locked()

    async def sync_catalog(self) -> IngestionResult:
        """
        执行完整目录同步

        异常:
            CatalogSyncInProgressException: 已有同步在运行
        """
        if self._sync_lock.locked():
            logger.warning("目录同步正在进行中，拒绝新的同步请求")
            raise CatalogSyncInProgressException()

        async with self._sync_lock:
            logger.info("开始目录同步")
            return await self.pipeline.ingest()

    def validate_limit(self, limit: Optional[int]) -> int:
        """校验检索数量，None 时使用默认值"""
        if limit is None:
            return self.default_limit
        if limit < self.MIN_SEARCH_LIMIT or limit > self.max_limit:
            raise InvalidSearchLimitException(limit, self.MIN_SEARCH_LIMIT, self.max_limit)
        return limit

    async def search_products(self, query: str, limit: Optional[int] = None) -> list[ProductWithSimilarity]:
        """
        按查询文本检索相似商品

        参数:
            query: 查询文本
            limit: 返回数量，范围 1-100，默认 10

        返回:
            list[ProductWithSimilarity]: 按相似度非递增排列的商品
        """
        if not query or not query.strip():
            raise CatalogValidationException("q", "查询文本不能为空")

        limit = self.validate_limit(limit)
        return await self.search_service.search(query.strip(), limit)

    async def get_products_by_category(self, category: str) -> list[Product]:
        if not category or not category.strip():
            raise CatalogValidationException("category", "品类不能为空")
        return await self.store.find_by_category(category.strip())

    async def get_products_by_ids(self, ids: list[str]) -> list[Product]:
        return await self.store.find_by_ids(ids)

    async def count_products(self) -> int:
        return await self.store.count()

    async def list_sales_channels(self) -> list[SalesChannel]:
        return await self.source.list_channels()

    async def fetch_source_products(self) -> list[Product]:
        """从目录源拉取商品（不生成向量）"""
        return await self.pipeline.fetch_catalog()
