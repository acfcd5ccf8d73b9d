"""
异常模块

提供系统中所有自定义异常的统一导入接口。

异常按照业务域组织：
- base: 基础异常类
- infrastructure: 外部适配器与向量存储异常
- catalog: 商品目录与推荐异常

错误代码范围：
- 100000-199999: 存储基础设施
- 200000-299999: 目录与推荐业务
- 300000-399999: 外部适配器

使用示例：
    from libs.exceptions import ProductNotFoundException, EmbeddingException
"""

# 基础异常
from .base import BaseHTTPException

# 基础设施异常
from .infrastructure import (
    StoreException,
    AdapterException,
    CatalogSourceException,
    EmbeddingException,
    TextGenerationException,
)

# 目录与推荐异常
from .catalog import (
    CatalogException,
    ProductNotFoundException,
    CatalogValidationException,
    InvalidSearchLimitException,
    UnsupportedIndustryException,
    CatalogSyncInProgressException,
    RecommendationException,
)

__all__ = [
    "BaseHTTPException",

    "StoreException",
    "AdapterException",
    "CatalogSourceException",
    "EmbeddingException",
    "TextGenerationException",

    "CatalogException",
    "ProductNotFoundException",
    "CatalogValidationException",
    "InvalidSearchLimitException",
    "UnsupportedIndustryException",
    "CatalogSyncInProgressException",
    "RecommendationException",
]
