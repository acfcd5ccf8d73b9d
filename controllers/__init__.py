"""
API Package

组织结构:
- catalog.py: 商品目录同步与检索
- recommendation.py: 推荐生成
- health.py: 健康检查
- dependencies.py: 依赖注入
"""

from fastapi import APIRouter

from .catalog import router as catalog_router
from .health import router as health_router
from .recommendation import recommendation_router, haircare_router


app_router = APIRouter()

# 注册所有路由器，包含统一的prefix和tags配置
app_router.include_router(catalog_router, prefix="/catalog", tags=["catalog"])
app_router.include_router(recommendation_router, prefix="/recommendations", tags=["recommendations"])
app_router.include_router(haircare_router, prefix="/haircare", tags=["haircare"])
app_router.include_router(health_router, tags=["health"])


__version__ = "1.0.0"
