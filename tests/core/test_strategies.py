"""
推荐策略测试

测试步骤分配、过滤条件组合、描述生成兜底以及策略注册表。
"""

import pytest

from core.recommendation import HaircareStrategy, SkincareStrategy, create_strategy
from core.recommendation.strategies.base import BaseRecommendationStrategy
from infra.llm import ChatCompletion
from libs.exceptions import UnsupportedIndustryException
from models import (
    CategoryFilter,
    CustomerProfile,
    ProductFilter,
    StepConfiguration,
    TagFilter,
)


@pytest.fixture
def frizz_profile():
    return CustomerProfile(
        primary_attribute="blonde",
        concerns=["frizz"],
        services=["balayage"],
        restrictions=["sulfates"],
    )


class TestHaircareStrategy:

    @pytest.mark.asyncio
    async def test_scenario_step_sizes(self, fake_text_generator, haircare_catalog, frizz_profile):
        strategy = HaircareStrategy(fake_text_generator)

        response = await strategy.generate_recommendation(frizz_profile, haircare_catalog)

        assert response.message == "Recommendation generated successfully"
        assert [step.name for step in response.routine] == ["Cleansing", "Conditioning", "Treatment & Styling"]
        assert [len(step.products) for step in response.routine] == [2, 2, 3]
        assert response.metadata.industry == "haircare"
        assert response.metadata.generated_at is not None

    @pytest.mark.asyncio
    async def test_every_product_lands_in_exactly_one_step(self, fake_text_generator, make_product, frizz_profile):
        products = [
            make_product("gid://a", category="Shampoo & Conditioner"),
            make_product("gid://b", category="conditioner"),
            make_product("gid://c", category="SHAMPOO"),
            make_product("gid://d", category=None),
            make_product("gid://e", category="Hair Oil"),
        ]
        strategy = HaircareStrategy(fake_text_generator)

        response = await strategy.generate_recommendation(frizz_profile, products)

        assigned = [product.external_id for step in response.routine for product in step.products]
        assert sorted(assigned) == sorted(product.external_id for product in products)
        assert len(assigned) == len(set(assigned))
        assert [p.external_id for p in response.routine[0].products] == ["gid://a", "gid://c"]

    @pytest.mark.asyncio
    async def test_generation_failure_uses_fallback(self, fake_text_generator, haircare_catalog, frizz_profile):
        fake_text_generator.failing_steps = {"Conditioning"}
        strategy = HaircareStrategy(fake_text_generator)

        response = await strategy.generate_recommendation(frizz_profile, haircare_catalog)

        conditioning = response.routine[1]
        assert conditioning.description == "Complete the Conditioning step using the recommended products."
        assert response.message == "Recommendation generated successfully"
        assert len(response.routine) == 3
        assert all(step.products for step in response.routine)
        assert response.routine[0].description == "Use these products daily."

    @pytest.mark.asyncio
    async def test_blank_generation_uses_fallback(self, fake_text_generator, haircare_catalog, frizz_profile):
        fake_text_generator.empty_steps = {"Cleansing"}
        strategy = HaircareStrategy(fake_text_generator)

        response = await strategy.generate_recommendation(frizz_profile, haircare_catalog)

        assert response.routine[0].description == "Complete the Cleansing step using the recommended products."

    def test_build_search_query(self, fake_text_generator):
        profile = CustomerProfile(
            primary_attribute="brunette",
            concerns=["frizz", "dryness"],
            services=["keratin"],
            current_routine=["shampoo daily"],
            usage_patterns=["blow dry"],
            additional_info="curly hair",
            restrictions=["parabens"],
        )
        query = HaircareStrategy(fake_text_generator).build_search_query(profile)
        assert query == "brunette frizz dryness keratin shampoo daily blow dry curly hair parabens"

    def test_empty_concerns_still_builds_query(self, fake_text_generator):
        query = HaircareStrategy(fake_text_generator).build_search_query(CustomerProfile(primary_attribute="red"))
        assert query == "red"

    def test_prompt_contains_profile_and_titles(self, fake_text_generator, frizz_profile, make_product):
        prompt = HaircareStrategy(fake_text_generator).generate_prompt(
            "Cleansing", frizz_profile, [make_product("gid://1", title="Hydrating Shampoo")]
        )
        assert '"Cleansing"' in prompt
        assert "Hair color: blonde" in prompt
        assert "Hair concerns: frizz" in prompt
        assert "Allergies: sulfates" in prompt
        assert "Recommended products for this step: Hydrating Shampoo" in prompt

    def test_prompt_without_products(self, fake_text_generator, frizz_profile):
        prompt = HaircareStrategy(fake_text_generator).generate_prompt("Conditioning", frizz_profile, [])
        assert "No specific products" in prompt

    @pytest.mark.asyncio
    async def test_generation_parameters(self, haircare_catalog, frizz_profile):
        calls = []

        class RecordingGenerator:
            async def complete(self, messages, max_tokens=None, temperature=0.7, model=None):
                calls.append((max_tokens, temperature))
                return ChatCompletion(text="ok")

        await HaircareStrategy(RecordingGenerator()).generate_recommendation(frizz_profile, haircare_catalog)

        assert calls == [(150, 0.7)] * 3


class TestSkincareStrategy:

    @pytest.mark.asyncio
    async def test_tag_steps_are_not_exclusive(self, fake_text_generator, make_product):
        products = [
            make_product("gid://1", tags=["Oil-Cleanser"]),
            make_product("gid://2", tags=["serum", "moisturizer"]),
            make_product("gid://3", tags=["SPF", "lotion"]),
            make_product("gid://4", tags=["toner"]),
        ]
        strategy = SkincareStrategy(fake_text_generator)

        response = await strategy.generate_recommendation(CustomerProfile(primary_attribute="dry"), products)

        by_step = {step.name: [p.external_id for p in step.products] for step in response.routine}
        assert by_step == {
            "Double Cleanse": ["gid://1"],
            "Treatment": ["gid://2"],
            "Moisturize": ["gid://2", "gid://3"],
            "Sun Protection": ["gid://3"],
        }
        assert response.metadata.industry == "skincare"

    def test_search_limit_and_tokens(self, fake_text_generator):
        strategy = SkincareStrategy(fake_text_generator)
        assert strategy.search_limit == 12
        assert strategy.max_tokens == 120


class TestFilterComposition:

    class ConfigurableStrategy(BaseRecommendationStrategy):
        industry = "test"

        def __init__(self, text_generator, steps):
            self.steps = steps
            super().__init__(text_generator)

        def get_step_configurations(self):
            return self.steps

        def build_search_query(self, profile):
            return profile.primary_attribute

        def generate_prompt(self, step_name, profile, products):
            return f'"{step_name}"'

    def make_strategy(self, fake_text_generator, product_filter):
        step = StepConfiguration(name="Only", order=1, filter=product_filter)
        return self.ConfigurableStrategy(fake_text_generator, [step])

    def test_empty_filter_matches_everything(self, fake_text_generator, haircare_catalog):
        strategy = self.make_strategy(fake_text_generator, ProductFilter())
        step = strategy.get_step_configurations()[0]
        assert len(strategy.filter_products_for_step(haircare_catalog, step)) == len(haircare_catalog)

    def test_category_conditions_are_combined(self, fake_text_generator, make_product):
        products = [
            make_product("gid://1", category="Deep Conditioner"),
            make_product("gid://2", category="Conditioner"),
            make_product("gid://3", category="Shampoo"),
        ]
        product_filter = ProductFilter(
            category=CategoryFilter(contains="conditioner", in_=("deep conditioner", "shampoo"))
        )
        strategy = self.make_strategy(fake_text_generator, product_filter)
        matched = strategy.filter_products_for_step(products, strategy.get_step_configurations()[0])
        assert [p.external_id for p in matched] == ["gid://1"]

    def test_category_equals_is_case_insensitive(self, fake_text_generator, make_product):
        products = [make_product("gid://1", category="SERUM"), make_product("gid://2", category="Serum Oil")]
        strategy = self.make_strategy(fake_text_generator, ProductFilter(category=CategoryFilter(equals="serum")))
        matched = strategy.filter_products_for_step(products, strategy.get_step_configurations()[0])
        assert [p.external_id for p in matched] == ["gid://1"]

    def test_tag_conditions_are_combined(self, fake_text_generator, make_product):
        products = [
            make_product("gid://1", tags=["vegan", "serum"]),
            make_product("gid://2", tags=["vegan", "serum", "fragrance"]),
            make_product("gid://3", tags=["serum"]),
        ]
        product_filter = ProductFilter(tags=TagFilter(has_all=("Vegan", "serum"), excludes=("fragrance",)))
        strategy = self.make_strategy(fake_text_generator, product_filter)
        matched = strategy.filter_products_for_step(products, strategy.get_step_configurations()[0])
        assert [p.external_id for p in matched] == ["gid://1"]

    def test_category_filter_accepts_in_alias(self):
        assert CategoryFilter.model_validate({"in": ["serum"]}).in_ == ("serum",)

    def test_duplicate_step_orders_rejected(self, fake_text_generator):
        steps = [
            StepConfiguration(name="A", order=1),
            StepConfiguration(name="B", order=1),
        ]
        with pytest.raises(ValueError):
            self.ConfigurableStrategy(fake_text_generator, steps)

    def test_steps_assigned_in_ascending_order(self, fake_text_generator, make_product):
        steps = [
            StepConfiguration(name="Rest", order=2, filter=ProductFilter(remainder=True)),
            StepConfiguration(name="Serums", order=1, filter=ProductFilter(category=CategoryFilter(equals="serum"))),
        ]
        products = [make_product("gid://1", category="Serum"), make_product("gid://2", category="Mask")]
        strategy = self.ConfigurableStrategy(fake_text_generator, steps)

        assignments = strategy.assign_products_to_steps(products)

        assert [(step.name, [p.external_id for p in matched]) for step, matched in assignments] == [
            ("Serums", ["gid://1"]),
            ("Rest", ["gid://2"]),
        ]


class TestStrategyRegistry:

    def test_creates_known_industries(self, fake_text_generator):
        assert isinstance(create_strategy("haircare", fake_text_generator), HaircareStrategy)
        assert isinstance(create_strategy(" SkinCare ", fake_text_generator), SkincareStrategy)

    def test_unknown_industry(self, fake_text_generator):
        with pytest.raises(UnsupportedIndustryException) as exc_info:
            create_strategy("supplements", fake_text_generator)
        assert exc_info.value.status_code == 400


class TestEmptyStringFilters:

    def test_empty_category_conditions_are_ignored(self, fake_text_generator, haircare_catalog):
        strategy = TestFilterComposition.ConfigurableStrategy(
            fake_text_generator,
            [StepConfiguration(name="Only", order=1, filter=ProductFilter(
                category=CategoryFilter(equals="", contains="")
            ))],
        )

        matched = strategy.filter_products_for_step(haircare_catalog, strategy.get_step_configurations()[0])

        assert len(matched) == len(haircare_catalog)
