"""
服务层

为HTTP控制器与脚本提供业务门面。
"""

from .catalog_service import CatalogService
from .recommendation_service import RecommendationService
from .haircare_service import HaircareService

__all__ = [
    "CatalogService",
    "RecommendationService",
    "HaircareService",
]
