"""
推荐策略模型

步骤配置在策略构造时确定，之后不可变。
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .product import Product


class CategoryFilter(BaseModel):
    """品类过滤条件，多个条件之间为 AND 关系，均大小写不敏感"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    equals: Optional[str] = None
    contains: Optional[str] = None
    in_: Optional[tuple[str, ...]] = Field(None, alias="in")


class TagFilter(BaseModel):
    """标签过滤条件，多个条件之间为 AND 关系，均大小写不敏感"""
    model_config = ConfigDict(frozen=True)

    has_any: Optional[tuple[str, ...]] = None
    has_all: Optional[tuple[str, ...]] = None
    excludes: Optional[tuple[str, ...]] = None


class ProductFilter(BaseModel):
    """
    步骤商品过滤条件

    remainder 为 True 时，仅匹配未被之前步骤领取的商品
    """
    model_config = ConfigDict(frozen=True)

    category: Optional[CategoryFilter] = None
    tags: Optional[TagFilter] = None
    remainder: bool = False


class StepConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="步骤名称")
    order: PositiveInt = Field(description="步骤顺序，在同一行业内唯一")
    filter: ProductFilter = Field(default_factory=ProductFilter)


class RecommendationStep(BaseModel):
    name: str
    order: int
    description: str
    products: list[Product] = Field(default_factory=list)


class RecommendationMetadata(BaseModel):
    industry: str
    generated_at: datetime


class RecommendationResponse(BaseModel):
    message: str
    routine: list[RecommendationStep] = Field(default_factory=list)
    metadata: Optional[RecommendationMetadata] = None
