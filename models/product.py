"""
商品数据模型

包含商品目录的数据库模型和业务模型，商品向量与商品数据同表存储（pgvector）。

主要模型:
- ProductOrm: 商品数据库模型
- Product: 商品业务模型
- ProductWithSimilarity: 带相似度分数的检索结果
"""

from datetime import datetime
from typing import Optional, Self

from pgvector.sqlalchemy import Vector
from pydantic import BaseModel, Field
from sqlalchemy import Column, String, Text, DateTime, Index, func
from sqlalchemy.dialects.postgresql import ARRAY

from libs.constants import EMBEDDING_DIMENSION
from .base import Base


class ProductOrm(Base):
    """
    商品数据库模型

    对应数据库中的products表结构，external_id 为商品在电商平台中的唯一标识
    """
    __tablename__ = "products"

    external_id = Column(String(255), primary_key=True)
    title = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    tags = Column(ARRAY(String), nullable=False, default=list)
    category = Column(String(255))
    image = Column(Text)
    price = Column(String(64))

    embedding = Column(Vector(EMBEDDING_DIMENSION), nullable=False)

    # 审计字段
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now()
    )

    __table_args__ = (
        Index(
            'idx_products_embedding_hnsw',
            'embedding',
            postgresql_using='hnsw',
            postgresql_ops={'embedding': 'vector_cosine_ops'},
        ),
        Index('idx_products_category_lower', func.lower(category)),
    )


class Product(BaseModel):
    """
    商品业务模型

    除 external_id 外的字段在每次同步时都可被替换
    """

    external_id: str = Field(description="电商平台商品ID")
    title: str = Field(default="", description="商品标题")
    description: str = Field(default="", description="商品描述")
    tags: list[str] = Field(default_factory=list, description="商品标签（保持原有顺序）")
    category: Optional[str] = Field(None, description="商品品类")
    image: Optional[str] = Field(None, description="主图URL")
    price: Optional[str] = Field(None, description="价格（字符串保留小数精度）")

    @classmethod
    def to_model(cls, product_orm: ProductOrm) -> Self:
        return cls(
            external_id=product_orm.external_id,
            title=product_orm.title or "",
            description=product_orm.description or "",
            tags=list(product_orm.tags or []),
            category=product_orm.category,
            image=product_orm.image,
            price=product_orm.price,
        )


class ProductWithSimilarity(Product):
    """相似度检索结果，similarity = 1 - 余弦距离"""

    similarity: float = Field(description="相似度分数，范围[-1, 1]")


class SalesChannel(BaseModel):
    """电商平台销售渠道"""

    id: str = Field(description="渠道ID")
    name: str = Field(description="渠道名称")


class CatalogPage(BaseModel):
    """目录分页结果"""

    products: list[Product] = Field(default_factory=list)
    has_next_page: bool = Field(default=False)
    end_cursor: Optional[str] = Field(None, description="下一页游标")
