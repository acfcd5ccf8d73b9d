from .profile_mapper import ProfileMapper
from .strategies import (
    BaseRecommendationStrategy,
    HaircareStrategy,
    SkincareStrategy,
    create_strategy,
)

__all__ = [
    "ProfileMapper",
    "BaseRecommendationStrategy",
    "HaircareStrategy",
    "SkincareStrategy",
    "create_strategy",
]
