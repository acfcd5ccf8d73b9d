"""
商品目录端点

POST /catalog/sync                          - 触发完整目录同步
GET  /catalog/products/source               - 从电商平台拉取商品（不生成向量）
GET  /catalog/channels                      - 销售渠道列表
GET  /catalog/products/category/{category}  - 按品类查询
GET  /catalog/products/search               - 相似度检索
GET  /catalog/products/count                - 商品总数
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from schemas import (
    CatalogSyncResponse,
    ProductCountResponse,
    ProductListResponse,
    ProductSearchResponse,
    SalesChannelListResponse,
)
from services import CatalogService
from utils import get_component_logger
from .dependencies import get_catalog_service

logger = get_component_logger(__name__, "CatalogEndpoints")

router = APIRouter()


@router.post("/sync", response_model=CatalogSyncResponse)
async def sync_catalog(service: CatalogService = Depends(get_catalog_service)):
    """拉取完整目录，生成向量并写入向量存储"""
    logger.info("目录同步请求")
    result = await service.sync_catalog()
    return CatalogSyncResponse(message=result.message, result=result)


@router.get("/products/source", response_model=ProductListResponse)
async def fetch_source_products(service: CatalogService = Depends(get_catalog_service)):
    products = await service.fetch_source_products()
    return ProductListResponse(products=products, total=len(products))


@router.get("/channels", response_model=SalesChannelListResponse)
async def list_channels(service: CatalogService = Depends(get_catalog_service)):
    channels = await service.list_sales_channels()
    return SalesChannelListResponse(channels=channels, total=len(channels))


@router.get("/products/category/{category}", response_model=ProductListResponse)
async def get_products_by_category(category: str, service: CatalogService = Depends(get_catalog_service)):
    products = await service.get_products_by_category(category)
    return ProductListResponse(products=products, total=len(products))


@router.get("/products/search", response_model=ProductSearchResponse)
async def search_products(
    q: str = Query("", description="查询文本"),
    limit: Optional[int] = Query(None, description="返回数量（1-100，默认10）"),
    service: CatalogService = Depends(get_catalog_service),
):
    """按查询文本做相似度检索"""
    effective_limit = service.validate_limit(limit)
    products = await service.search_products(q, effective_limit)
    return ProductSearchResponse(query=q, limit=effective_limit, products=products)


@router.get("/products/count", response_model=ProductCountResponse)
async def count_products(service: CatalogService = Depends(get_catalog_service)):
    count = await service.count_products()
    return ProductCountResponse(count=count)
