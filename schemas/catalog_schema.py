"""
商品目录接口模型
"""

from pydantic import Field

from models import IngestionResult, Product, ProductWithSimilarity, SalesChannel
from .responses import BaseResponse, ListResponse


class CatalogSyncResponse(BaseResponse):
    result: IngestionResult = Field(description="同步结果")


class ProductListResponse(ListResponse):
    products: list[Product] = Field(default_factory=list)


class ProductSearchResponse(BaseResponse):
    query: str = Field(description="查询文本")
    limit: int = Field(description="返回数量上限")
    products: list[ProductWithSimilarity] = Field(default_factory=list)


class ProductCountResponse(BaseResponse):
    count: int = Field(description="商品总数")


class SalesChannelListResponse(ListResponse):
    channels: list[SalesChannel] = Field(default_factory=list)
