"""
目录同步流程

编排 目录源 -> 文本嵌入 -> 向量存储 的批处理同步:
- 分页拉取完整目录（页间固定等待，数量上限截断）
- 按固定批次生成向量，失败的批次等待后重试一次，再次失败则整批跳过
- 逐商品校验向量并写入，单个商品失败只记录错误，不中断整次同步
- 批次之间顺序执行，并使用与分页相同的固定等待
"""

import asyncio
from collections.abc import Sequence
from typing import Optional

from infra.ecommerce import CatalogSource
from infra.embedding import EmbeddingProvider, is_valid_vector
from libs.exceptions import BaseHTTPException
from models import IngestionResult, IngestionStatus, Product
from utils import get_component_logger, get_current_datetime, get_processing_time
from .vector_store import ProductVectorStore

logger = get_component_logger(__name__, "CatalogIngestion")


def build_embedding_text(product: Product, max_length: int = 8000) -> str:
    """
    生成商品的嵌入输入文本

    依次拼接标题、描述、品类和标签，忽略空字段，并截断到最大长度。

    参数:
        product: 商品
        max_length: 最大字符数

    返回:
        str: 嵌入输入文本
    """
    parts = [
        product.title,
        product.description,
        product.category or "",
        " ".join(product.tags),
    ]
    text = " ".join(part.strip() for part in parts if part and part.strip())
    return text[:max_length]


def _describe_error(error: Exception) -> str:
    if isinstance(error, BaseHTTPException):
        return str(error.detail)
    return str(error) or error.__class__.__name__


class CatalogIngestionPipeline:
    """
    目录同步流程

    单次同步由单个逻辑worker顺序执行，不做批次级并发，以控制嵌入服务的请求速率。
    """

    def __init__(
        self,
        source: CatalogSource,
        embedder: EmbeddingProvider,
        store: ProductVectorStore,
        batch_size: int = 20,
        max_products: int = 8000,
        request_delay: float = 1.0,
        retry_delay: float = 2.0,
        max_text_length: int = 8000,
        channel_id: Optional[str] = None,
        status: Optional[str] = "active",
    ):
        """
        参数:
            source: 商品目录源
            embedder: 文本嵌入提供商
            store: 商品向量存储
            batch_size: 每批嵌入的商品数量
            max_products: 单次同步的商品数量上限
            request_delay: 分页请求之间、批次之间的等待时间（秒）
            retry_delay: 批次嵌入失败后重试前的等待时间（秒）
            max_text_length: 嵌入文本最大字符数
            channel_id: 销售渠道过滤
            status: 商品状态过滤
        """
        if batch_size <= 0:
            raise ValueError("batch_size 必须大于0")

        self.source = source
        self.embedder = embedder
        self.store = store
        self.batch_size = batch_size
        self.max_products = max_products
        self.request_delay = request_delay
        self.retry_delay = retry_delay
        self.max_text_length = max_text_length
        self.channel_id = channel_id
        self.status = status

    async def fetch_catalog(self) -> list[Product]:
        """
        分页拉取完整目录

        直到目录源报告没有下一页或达到数量上限为止；目录源报告有下一页但没有游标时停止分页。

        返回:
            list[Product]: 不超过数量上限的商品列表
        """
        products: list[Product] = []
        cursor: Optional[str] = None
        page_number = 0

        logger.info("开始拉取商品目录...")
        while True:
            page = await self.source.fetch_page(cursor, self.channel_id, self.status)
            page_number += 1
            products.extend(page.products)
            logger.info(f"第 {page_number} 页拉取完成: {len(page.products)} 个商品, 累计 {len(products)}")

            if not page.has_next_page or len(products) >= self.max_products:
                break
            if not page.end_cursor:
                logger.warning("目录源报告存在下一页但未返回游标，停止分页")
                break

            cursor = page.end_cursor
            await asyncio.sleep(self.request_delay)

        logger.info(f"商品目录拉取完成: {min(len(products), self.max_products)} 个商品")
        return products[:self.max_products]

    async def _embed_batch(self, texts: Sequence[str]) -> list[Optional[list[float]]]:
        """生成批次向量，失败时等待后重试一次，再次失败则抛出异常"""
        try:
            return await self.embedder.embed_batch(texts)
        except Exception as e:
            logger.error(f"批次嵌入失败，{self.retry_delay}秒后重试: {_describe_error(e)}")
            await asyncio.sleep(self.retry_delay)
            return await self.embedder.embed_batch(texts)

    async def _process_batch(self, batch: Sequence[Product], errors: list[str]) -> int:
        """
        处理单个批次

        返回:
            int: 成功写入的商品数量
        """
        texts = [build_embedding_text(product, self.max_text_length) for product in batch]

        try:
            vectors = await self._embed_batch(texts)
        except Exception as e:
            reason = _describe_error(e)
            logger.error(f"批次重试后仍然失败，跳过 {len(batch)} 个商品: {reason}")
            errors.extend(f"Embedding failed for product {product.title}: {reason}" for product in batch)
            return 0

        success = 0
        for index, product in enumerate(batch):
            vector = vectors[index] if index < len(vectors) else None
            if not is_valid_vector(vector):
                message = f"Invalid embedding for product {product.title}"
                logger.error(message)
                errors.append(message)
                continue

            try:
                await self.store.upsert(product, vector)
                success += 1
            except Exception as e:
                message = f"DB error for product {product.title}: {_describe_error(e)}"
                logger.error(message)
                errors.append(message)

        return success

    async def ingest(self) -> IngestionResult:
        """
        执行一次完整的目录同步

        部分失败不会抛出异常；只有目录为空时返回 no_products 状态。
        目录拉取失败时异常直接向上传播。

        返回:
            IngestionResult: 成功数量、总数量及逐商品错误
        """
        start = get_current_datetime()
        products = await self.fetch_catalog()

        if not products:
            logger.warning("目录中没有可同步的商品")
            return IngestionResult(
                status=IngestionStatus.NO_PRODUCTS,
                message="No products found to embed",
                processed_count=0,
                total_count=0,
                duration_seconds=round(get_processing_time(start), 2),
            )

        logger.info(f"开始嵌入并写入 {len(products)} 个商品...")
        errors: list[str] = []
        processed = 0
        total_batches = (len(products) + self.batch_size - 1) // self.batch_size

        for batch_number, offset in enumerate(range(0, len(products), self.batch_size), start=1):
            batch_start = get_current_datetime()
            batch = products[offset:offset + self.batch_size]

            processed += await self._process_batch(batch, errors)

            logger.info(
                f"批次 {batch_number}/{total_batches} 处理完成, "
                f"耗时 {get_processing_time(batch_start):.2f}s"
            )

            if offset + self.batch_size < len(products):
                await asyncio.sleep(self.request_delay)

        duration = round(get_processing_time(start), 2)
        result = IngestionResult(
            status=IngestionStatus.COMPLETED,
            message=f"Successfully embedded {processed} out of {len(products)} products in {duration:.2f}s",
            processed_count=processed,
            total_count=len(products),
            errors=errors,
            duration_seconds=duration,
        )

        if errors:
            logger.warning(f"{result.message}, {len(errors)} 个错误")
        else:
            logger.info(result.message)
        return result
