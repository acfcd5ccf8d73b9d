"""
商品数据访问存储库

提供纯粹的数据访问操作:
- 商品与向量的写入（按 external_id 幂等upsert）
- 余弦相似度检索、按ID/品类查询、计数
- 纯数据访问，无业务逻辑
- 依赖注入，支持外部会话管理
"""

from collections.abc import Sequence

from sqlalchemy import Select, select, func
from sqlalchemy.dialects.postgresql import insert, Insert
from sqlalchemy.ext.asyncio import AsyncSession

from models import ProductOrm, Product, ProductWithSimilarity
from utils import get_component_logger

logger = get_component_logger(__name__, "ProductRepository")

# 检索结果不返回向量列
PRODUCT_COLUMNS = (
    ProductOrm.external_id,
    ProductOrm.title,
    ProductOrm.description,
    ProductOrm.tags,
    ProductOrm.category,
    ProductOrm.image,
    ProductOrm.price,
)


class ProductRepository:

    @staticmethod
    def build_upsert_statement(product: Product, embedding: Sequence[float]) -> Insert:
        """
        构建upsert语句

        冲突时标题、描述、标签和向量总是使用新值；品类、图片、价格仅在新值非空时覆盖，
        否则保留原值。created_at 保持不变，updated_at 刷新。
        """
        stmt = insert(ProductOrm).values(
            external_id=product.external_id,
            title=product.title,
            description=product.description,
            tags=list(product.tags),
            category=product.category,
            image=product.image,
            price=product.price,
            embedding=list(embedding),
        )
        excluded = stmt.excluded
        return stmt.on_conflict_do_update(
            index_elements=[ProductOrm.external_id],
            set_={
                "title": excluded.title,
                "description": excluded.description,
                "tags": excluded.tags,
                "category": func.coalesce(func.nullif(excluded.category, ""), ProductOrm.category),
                "image": func.coalesce(func.nullif(excluded.image, ""), ProductOrm.image),
                "price": func.coalesce(func.nullif(excluded.price, ""), ProductOrm.price),
                "embedding": excluded.embedding,
                "updated_at": func.now(),
            },
        )

    @staticmethod
    def build_similarity_statement(embedding: Sequence[float], limit: int) -> Select:
        """
        构建相似度检索语句

        按余弦距离升序排列，距离相同时按 external_id 排序，保证结果确定。
        """
        distance = ProductOrm.embedding.cosine_distance(list(embedding))
        return (
            select(*PRODUCT_COLUMNS, (1 - distance).label("similarity"))
            .order_by(distance, ProductOrm.external_id)
            .limit(limit)
        )

    @staticmethod
    async def upsert(product: Product, embedding: Sequence[float], session: AsyncSession) -> None:
        """写入或更新商品及其向量"""
        try:
            await session.execute(ProductRepository.build_upsert_statement(product, embedding))
            logger.debug(f"写入商品: {product.external_id}")
        except Exception as e:
            logger.error(f"写入商品失败: {product.external_id}, 错误: {e}")
            raise

    @staticmethod
    async def find_by_similarity(
        embedding: Sequence[float],
        limit: int,
        session: AsyncSession
    ) -> list[ProductWithSimilarity]:
        """按余弦相似度检索最相近的商品"""
        try:
            result = await session.execute(ProductRepository.build_similarity_statement(embedding, limit))
            return [
                ProductWithSimilarity(
                    external_id=row.external_id,
                    title=row.title or "",
                    description=row.description or "",
                    tags=list(row.tags or []),
                    category=row.category,
                    image=row.image,
                    price=row.price,
                    similarity=float(row.similarity),
                )
                for row in result.all()
            ]
        except Exception as e:
            logger.error(f"相似度检索失败: limit={limit}, 错误: {e}")
            raise

    @staticmethod
    async def find_by_ids(ids: Sequence[str], session: AsyncSession) -> list[Product]:
        """根据ID列表获取商品，空列表直接返回"""
        if not ids:
            return []
        try:
            stmt = select(ProductOrm).where(ProductOrm.external_id.in_(list(ids)))
            result = await session.execute(stmt)
            return [Product.to_model(orm) for orm in result.scalars().all()]
        except Exception as e:
            logger.error(f"按ID获取商品失败: {len(ids)} 个ID, 错误: {e}")
            raise

    @staticmethod
    async def find_by_category(category: str, session: AsyncSession) -> list[Product]:
        """按品类查询商品（大小写不敏感的精确匹配）"""
        try:
            stmt = (
                select(ProductOrm)
                .where(func.lower(ProductOrm.category) == category.lower())
                .order_by(ProductOrm.title)
            )
            result = await session.execute(stmt)
            return [Product.to_model(orm) for orm in result.scalars().all()]
        except Exception as e:
            logger.error(f"按品类获取商品失败: {category}, 错误: {e}")
            raise

    @staticmethod
    async def count(session: AsyncSession) -> int:
        """统计商品总数"""
        try:
            result = await session.execute(select(func.count()).select_from(ProductOrm))
            return result.scalar_one()
        except Exception as e:
            logger.error(f"统计商品数量失败: {e}")
            raise
