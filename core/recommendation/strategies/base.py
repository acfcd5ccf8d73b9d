"""
推荐策略基类

行业策略定义步骤结构、检索语句与提示词；基类负责按步骤顺序分配商品、
逐步骤生成描述并组装推荐结果。
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from infra.llm import ChatMessage, TextGenerator
from libs.constants import FALLBACK_STEP_DESCRIPTION
from models import (
    CustomerProfile,
    Product,
    ProductFilter,
    RecommendationMetadata,
    RecommendationResponse,
    RecommendationStep,
    StepConfiguration,
)
from utils import get_component_logger, get_current_datetime

logger = get_component_logger(__name__, "RecommendationStrategy")


class BaseRecommendationStrategy(ABC):
    """
    推荐策略抽象基类

    属性:
        industry: 行业标识
        exclusive_steps: 为 True 时每个商品最多归属一个步骤（按步骤顺序先匹配先得）
        search_limit: 相似度检索的商品数量
        max_tokens: 步骤描述的最大token数
        temperature: 步骤描述的采样温度
    """

    industry: str
    exclusive_steps: bool = False
    search_limit: int = 10
    max_tokens: int = 150
    temperature: float = 0.7

    def __init__(self, text_generator: TextGenerator):
        self.text_generator = text_generator

        orders = [step.order for step in self.get_step_configurations()]
        if len(orders) != len(set(orders)):
            raise ValueError(f"{self.industry} 策略的步骤顺序存在重复: {orders}")

    def get_industry(self) -> str:
        return self.industry

    @abstractmethod
    def get_step_configurations(self) -> list[StepConfiguration]:
        pass

    @abstractmethod
    def build_search_query(self, profile: CustomerProfile) -> str:
        """根据客户画像生成相似度检索语句"""
        pass

    @abstractmethod
    def generate_prompt(self, step_name: str, profile: CustomerProfile, products: Sequence[Product]) -> str:
        """生成步骤描述的提示词"""
        pass

    @staticmethod
    def _matches(product: Product, product_filter: ProductFilter) -> bool:
        """品类条件与标签条件按 AND 组合，未设置或为空字符串的条件不参与过滤"""
        category_filter = product_filter.category
        if category_filter:
            category = (product.category or "").lower()

            if category_filter.equals and category != category_filter.equals.lower():
                return False
            if category_filter.contains and category_filter.contains.lower() not in category:
                return False
            if category_filter.in_ is not None and category not in {c.lower() for c in category_filter.in_}:
                return False

        tag_filter = product_filter.tags
        if tag_filter:
            tags = {tag.lower() for tag in product.tags}

            if tag_filter.has_any is not None and not any(tag.lower() in tags for tag in tag_filter.has_any):
                return False
            if tag_filter.has_all is not None and not all(tag.lower() in tags for tag in tag_filter.has_all):
                return False
            if tag_filter.excludes is not None and any(tag.lower() in tags for tag in tag_filter.excludes):
                return False

        return True

    def filter_products_for_step(self, products: Sequence[Product], step: StepConfiguration) -> list[Product]:
        """按步骤的过滤条件筛选商品，保持输入顺序"""
        return [product for product in products if self._matches(product, step.filter)]

    def assign_products_to_steps(
        self,
        products: Sequence[Product],
    ) -> list[tuple[StepConfiguration, list[Product]]]:
        """
        按步骤顺序（升序）为每个步骤分配商品

        独占模式或 remainder 步骤从剩余商品池中筛选，被领取的商品从剩余池中移除。
        """
        remaining = list(products)
        assignments = []

        for step in sorted(self.get_step_configurations(), key=lambda s: s.order):
            pool = remaining if (self.exclusive_steps or step.filter.remainder) else list(products)
            matched = self.filter_products_for_step(pool, step)

            claimed = {product.external_id for product in matched}
            remaining = [product for product in remaining if product.external_id not in claimed]
            assignments.append((step, matched))

        return assignments

    async def generate_step_description(
        self,
        step_name: str,
        profile: CustomerProfile,
        products: Sequence[Product],
    ) -> str:
        """
        生成步骤描述

        文本生成失败或返回空文本时使用固定兜底文案，不中断整个推荐流程。
        """
        fallback = FALLBACK_STEP_DESCRIPTION.format(step=step_name)
        prompt = self.generate_prompt(step_name, profile, products)

        try:
            completion = await self.text_generator.complete(
                [ChatMessage(role="user", content=prompt)],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.warning(f"步骤描述生成失败，使用兜底文案: step={step_name}, 错误: {e!r}")
            return fallback

        text = (completion.text or "").strip()
        return text or fallback

    async def generate_recommendation(
        self,
        profile: CustomerProfile,
        products: Sequence[Product],
    ) -> RecommendationResponse:
        """
        生成完整推荐流程

        参数:
            profile: 客户画像
            products: 候选商品

        返回:
            RecommendationResponse: 按步骤顺序排列的推荐结果
        """
        routine = []
        for step, step_products in self.assign_products_to_steps(products):
            description = await self.generate_step_description(step.name, profile, step_products)
            routine.append(
                RecommendationStep(
                    name=step.name,
                    order=step.order,
                    description=description,
                    products=step_products,
                )
            )
            logger.debug(f"步骤 {step.order} {step.name}: {len(step_products)} 个商品")

        return RecommendationResponse(
            message="Recommendation generated successfully",
            routine=routine,
            metadata=RecommendationMetadata(
                industry=self.get_industry(),
                generated_at=get_current_datetime(),
            ),
        )
