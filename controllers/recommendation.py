"""
推荐端点

POST /recommendations - 按配置的行业策略生成推荐流程
POST /haircare        - 护发推荐
"""

from fastapi import APIRouter, Depends

from models import CustomerProfile, HaircareProfile, RecommendationResponse
from schemas import HaircareResponse
from services import HaircareService, RecommendationService
from utils import get_component_logger
from .dependencies import get_haircare_service, get_recommendation_service

logger = get_component_logger(__name__, "RecommendationEndpoints")

recommendation_router = APIRouter()
haircare_router = APIRouter()


@recommendation_router.post("", response_model=RecommendationResponse)
async def generate_recommendation(
    profile: CustomerProfile,
    service: RecommendationService = Depends(get_recommendation_service),
):
    logger.info(f"推荐请求: industry={service.get_industry()}")
    return await service.generate_recommendation(profile)


@haircare_router.post("", response_model=HaircareResponse)
async def generate_haircare_recommendation(
    profile: HaircareProfile,
    service: HaircareService = Depends(get_haircare_service),
):
    logger.info("护发推荐请求")
    return await service.generate_haircare_recommendation(profile)
