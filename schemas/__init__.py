from .responses import BaseResponse, ListResponse
from .catalog_schema import (
    CatalogSyncResponse,
    ProductListResponse,
    ProductSearchResponse,
    ProductCountResponse,
    SalesChannelListResponse,
)
from .recommendation_schema import HaircareStep, HaircareResponse

__all__ = [
    "BaseResponse",
    "ListResponse",
    "CatalogSyncResponse",
    "ProductListResponse",
    "ProductSearchResponse",
    "ProductCountResponse",
    "SalesChannelListResponse",
    "HaircareStep",
    "HaircareResponse",
]
