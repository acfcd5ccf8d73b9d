"""
护肤行业推荐策略

步骤按标签筛选，同一商品可以出现在多个步骤中。
"""

from collections.abc import Sequence

from models import (
    CustomerProfile,
    Industry,
    Product,
    ProductFilter,
    StepConfiguration,
    TagFilter,
)
from .base import BaseRecommendationStrategy

SKINCARE_STEPS = [
    StepConfiguration(
        name="Double Cleanse",
        order=1,
        filter=ProductFilter(tags=TagFilter(has_any=("oil-cleanser", "foam-cleanser", "micellar-water"))),
    ),
    StepConfiguration(
        name="Treatment",
        order=2,
        filter=ProductFilter(tags=TagFilter(has_any=("serum", "essence", "treatment"))),
    ),
    StepConfiguration(
        name="Moisturize",
        order=3,
        filter=ProductFilter(tags=TagFilter(has_any=("moisturizer", "cream", "lotion"))),
    ),
    StepConfiguration(
        name="Sun Protection",
        order=4,
        filter=ProductFilter(tags=TagFilter(has_any=("spf", "sunscreen"))),
    ),
]

STEP_INSTRUCTIONS = {
    "Double Cleanse": "Create a description for the double cleansing step",
    "Treatment": "Describe the treatment step",
    "Moisturize": "Explain the moisturizing step",
    "Sun Protection": "Describe the sun protection step",
}


class SkincareStrategy(BaseRecommendationStrategy):
    industry = Industry.SKINCARE
    exclusive_steps = False
    search_limit = 12
    max_tokens = 120
    temperature = 0.7

    def get_step_configurations(self) -> list[StepConfiguration]:
        return list(SKINCARE_STEPS)

    def build_search_query(self, profile: CustomerProfile) -> str:
        parts = [
            profile.primary_attribute,
            *profile.concerns,
            *profile.services,
            *profile.current_routine,
            *profile.restrictions,
            profile.additional_info,
        ]
        return " ".join(part for part in parts if part)

    def generate_prompt(self, step_name: str, profile: CustomerProfile, products: Sequence[Product]) -> str:
        instruction = STEP_INSTRUCTIONS.get(step_name, f'Describe the "{step_name}" step')
        skin_type = profile.primary_attribute or "unspecified"
        concerns = ", ".join(profile.concerns) or "none specified"
        product_titles = ", ".join(product.title for product in products) or "No specific products"

        return (
            "You are a skincare expert.\n"
            f"{instruction} for {skin_type} skin with concerns: {concerns}.\n"
            f"Avoid: {', '.join(profile.restrictions) or 'nothing specified'}.\n"
            f"Recommended products for this step: {product_titles}\n"
            "Keep it concise and actionable."
        )
