"""
依赖注入

路由通过这些函数获取服务实例，测试中可以通过 app.dependency_overrides 替换。
"""

from libs.factory import service_factory
from services import CatalogService, HaircareService, RecommendationService


def get_catalog_service() -> CatalogService:
    return service_factory.get_catalog_service()


def get_recommendation_service() -> RecommendationService:
    return service_factory.get_recommendation_service()


def get_haircare_service() -> HaircareService:
    return service_factory.get_haircare_service()
