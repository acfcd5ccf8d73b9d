"""
护发行业推荐策略

步骤: 清洁 -> 护发 -> 护理与造型。
最后一步接收前两步未领取的全部商品。
"""

from collections.abc import Sequence

from models import (
    CategoryFilter,
    CustomerProfile,
    Industry,
    Product,
    ProductFilter,
    StepConfiguration,
)
from .base import BaseRecommendationStrategy

HAIRCARE_STEPS = [
    StepConfiguration(
        name="Cleansing",
        order=1,
        filter=ProductFilter(category=CategoryFilter(contains="shampoo")),
    ),
    StepConfiguration(
        name="Conditioning",
        order=2,
        filter=ProductFilter(category=CategoryFilter(contains="conditioner")),
    ),
    StepConfiguration(
        name="Treatment & Styling",
        order=3,
        filter=ProductFilter(remainder=True),
    ),
]


class HaircareStrategy(BaseRecommendationStrategy):
    industry = Industry.HAIRCARE
    exclusive_steps = True
    search_limit = 10
    max_tokens = 150
    temperature = 0.7

    def get_step_configurations(self) -> list[StepConfiguration]:
        return list(HAIRCARE_STEPS)

    def build_search_query(self, profile: CustomerProfile) -> str:
        parts = [
            profile.primary_attribute,
            *profile.concerns,
            *profile.services,
            *profile.current_routine,
            *profile.usage_patterns,
            profile.additional_info,
            *profile.restrictions,
        ]
        return " ".join(part for part in parts if part)

    def generate_prompt(self, step_name: str, profile: CustomerProfile, products: Sequence[Product]) -> str:
        product_titles = ", ".join(product.title for product in products) or "No specific products"

        return (
            "You are a hair care expert.\n"
            f'Create a short, friendly description for the "{step_name}" step of a customer\'s hair routine.\n'
            "\n"
            "Customer profile:\n"
            f"- Hair color: {profile.primary_attribute or 'not specified'}\n"
            f"- Hair concerns: {', '.join(profile.concerns) or 'none specified'}\n"
            f"- Salon services: {', '.join(profile.services) or 'none'}\n"
            f"- Home routine: {', '.join(profile.current_routine) or 'not specified'}\n"
            f"- Styling routine: {', '.join(profile.usage_patterns) or 'not specified'}\n"
            f"- Allergies: {', '.join(profile.restrictions) or 'none'}\n"
            "\n"
            f"Recommended products for this step: {product_titles}\n"
            "\n"
            "Keep it concise and actionable."
        )
