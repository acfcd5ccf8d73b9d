"""
护发推荐服务模块

将护发画像转换为通用画像后委托推荐服务，并转换为护发响应格式。
"""

from typing import Any

from core.recommendation import ProfileMapper
from models import HaircareProfile
from utils import get_component_logger
from .recommendation_service import RecommendationService

logger = get_component_logger(__name__, "HaircareService")


class HaircareService:

    def __init__(self, recommendation_service: RecommendationService):
        self.recommendation_service = recommendation_service

    async def generate_haircare_recommendation(self, profile: HaircareProfile) -> dict[str, Any]:
        """
        生成护发推荐

        返回:
            dict: {message, routine: [{step, description, products}]}
        """
        logger.debug("护发画像转换为通用画像")
        customer_profile = ProfileMapper.from_haircare_profile(profile)

        recommendation = await self.recommendation_service.generate_recommendation(customer_profile)

        return {
            "message": recommendation.message,
            "routine": [
                {
                    "step": step.name,
                    "description": step.description,
                    "products": step.products,
                }
                for step in recommendation.routine
            ],
        }
