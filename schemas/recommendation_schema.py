"""
推荐接口模型
"""

from pydantic import BaseModel, Field

from models import Product


class HaircareStep(BaseModel):
    step: str = Field(description="步骤名称")
    description: str = Field(description="步骤描述")
    products: list[Product] = Field(default_factory=list)


class HaircareResponse(BaseModel):
    message: str
    routine: list[HaircareStep] = Field(default_factory=list)
