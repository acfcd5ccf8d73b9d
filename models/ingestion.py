"""
目录同步结果模型
"""

from pydantic import BaseModel, Field

from .enums import IngestionStatus


class IngestionResult(BaseModel):
    """
    目录同步结果

    部分失败不会抛出异常，而是以错误列表的形式记录在结果中
    """

    status: IngestionStatus = Field(description="同步状态")
    message: str = Field(description="结果描述")
    processed_count: int = Field(default=0, description="成功写入的商品数量")
    total_count: int = Field(default=0, description="本次拉取的商品总数")
    errors: list[str] = Field(default_factory=list, description="逐商品错误信息")
    duration_seconds: float = Field(default=0.0, description="耗时（秒）")
