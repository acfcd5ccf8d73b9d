"""
行业推荐策略注册表
"""

from infra.llm import TextGenerator
from libs.exceptions import UnsupportedIndustryException
from models import Industry
from .base import BaseRecommendationStrategy
from .haircare import HaircareStrategy
from .skincare import SkincareStrategy

STRATEGY_REGISTRY: dict[str, type[BaseRecommendationStrategy]] = {
    Industry.HAIRCARE: HaircareStrategy,
    Industry.SKINCARE: SkincareStrategy,
}


def create_strategy(industry: str, text_generator: TextGenerator) -> BaseRecommendationStrategy:
    """
    根据行业创建推荐策略

    异常:
        UnsupportedIndustryException: 未注册的行业
    """
    strategy_cls = STRATEGY_REGISTRY.get((industry or "").strip().lower())
    if strategy_cls is None:
        raise UnsupportedIndustryException(industry)
    return strategy_cls(text_generator)


__all__ = [
    "BaseRecommendationStrategy",
    "HaircareStrategy",
    "SkincareStrategy",
    "STRATEGY_REGISTRY",
    "create_strategy",
]
