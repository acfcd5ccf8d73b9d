"""
模型包

包含系统中使用的所有数据模型。
每个文件包含相关业务的所有模型（Pydantic业务模型 + SQLAlchemy数据库模型）。

模型文件:
- product.py: 商品目录相关模型
- ingestion.py: 目录同步结果模型
- profile.py: 客户画像模型
- recommendation.py: 推荐策略与推荐结果模型
- enums.py: 枚举
"""

from .base import Base
from .enums import IngestionStatus, Industry
from .product import (
    ProductOrm,
    Product,
    ProductWithSimilarity,
    SalesChannel,
    CatalogPage,
)
from .ingestion import IngestionResult
from .profile import CustomerProfile, HaircareProfile
from .recommendation import (
    CategoryFilter,
    TagFilter,
    ProductFilter,
    StepConfiguration,
    RecommendationStep,
    RecommendationMetadata,
    RecommendationResponse,
)

__all__ = [
    "Base",

    # Enums
    "IngestionStatus",
    "Industry",

    # Product
    "ProductOrm",
    "Product",
    "ProductWithSimilarity",
    "SalesChannel",
    "CatalogPage",

    # Ingestion
    "IngestionResult",

    # Profile
    "CustomerProfile",
    "HaircareProfile",

    # Recommendation
    "CategoryFilter",
    "TagFilter",
    "ProductFilter",
    "StepConfiguration",
    "RecommendationStep",
    "RecommendationMetadata",
    "RecommendationResponse",
]
