"""
客户画像模型

画像仅用于生成推荐，不做持久化。

主要模型:
- CustomerProfile: 行业通用画像，推荐引擎的输入
- HaircareProfile: 护发行业画像
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CustomerProfile(BaseModel):
    """
    行业通用的客户画像

    concerns 为空时依然合法，只是生成的检索语句信息量较低
    """

    primary_attribute: str = Field(default="", description="主要属性（如发色、肤质）")
    concerns: list[str] = Field(default_factory=list, description="关注的问题")
    services: list[str] = Field(default_factory=list, description="近期接受的服务")
    current_routine: list[str] = Field(default_factory=list, description="当前护理流程")
    usage_patterns: list[str] = Field(default_factory=list, description="使用习惯")
    service_frequency: Optional[str] = Field(None, description="到店频率")
    recent_change: Optional[bool] = Field(None, description="近期是否有明显变化")
    restrictions: list[str] = Field(default_factory=list, description="过敏或禁忌成分")
    additional_info: Optional[str] = Field(None, description="补充说明")
    custom_attributes: dict[str, Any] = Field(default_factory=dict, description="行业自定义属性")


class HaircareProfile(BaseModel):
    """护发行业客户画像"""

    hair_color: str = Field(description="发色")
    hair_concerns: list[str] = Field(description="头发问题")
    services: list[str] = Field(default_factory=list, description="沙龙服务")
    recent_change: bool = Field(default=False, description="近期是否有明显变化")
    salon_frequency: str = Field(default="", description="沙龙频率")
    home_routine: list[str] = Field(default_factory=list, description="居家护理")
    styling_routine: list[str] = Field(default_factory=list, description="造型习惯")
    allergies: Optional[list[str]] = Field(None, description="过敏成分")
    extra_info: Optional[str] = Field(None, description="补充说明")
