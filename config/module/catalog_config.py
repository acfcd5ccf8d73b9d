"""
目录同步与推荐配置模块
"""

from pydantic import Field, NonNegativeFloat, PositiveInt
from pydantic_settings import BaseSettings


class CatalogConfig(BaseSettings):
    """
    目录同步、检索与推荐配置类
    """

    # 目录同步
    INGEST_BATCH_SIZE: PositiveInt = Field(
        description="每批嵌入的商品数量",
        default=20,
    )

    MAX_CATALOG_PRODUCTS: PositiveInt = Field(
        description="单次同步的商品数量上限",
        default=8000,
    )

    CATALOG_REQUEST_DELAY: NonNegativeFloat = Field(
        description="分页请求之间以及批次之间的等待时间（秒）",
        default=1.0,
    )

    EMBEDDING_RETRY_DELAY: NonNegativeFloat = Field(
        description="批次嵌入失败后重试前的等待时间（秒）",
        default=2.0,
    )

    EMBEDDING_TEXT_MAX_LENGTH: PositiveInt = Field(
        description="嵌入文本最大字符数",
        default=8000,
    )

    # 检索
    SEARCH_DEFAULT_LIMIT: PositiveInt = Field(
        description="相似度检索默认返回数量",
        default=10,
    )

    SEARCH_MAX_LIMIT: PositiveInt = Field(
        description="相似度检索最大返回数量",
        default=100,
    )

    # 推荐
    RECOMMENDATION_INDUSTRY: str = Field(
        description="默认推荐行业策略",
        default="haircare",
    )
