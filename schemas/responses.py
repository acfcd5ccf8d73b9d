"""
接口响应基类

成功响应统一携带 code=0 与毫秒时间戳；错误响应由 main.py 的异常处理器
按 BaseHTTPException.data 渲染，不经过这些模型。
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from utils import get_current_timestamp_ms


class BaseResponse(BaseModel):
    """目录与推荐接口的响应基类"""

    code: int = Field(default=0, description="业务状态码，0表示成功")
    message: str = Field(default="success", description="响应消息")
    timestamp: int = Field(default_factory=get_current_timestamp_ms, description="响应时间戳（毫秒）")
    metadata: Optional[dict[str, Any]] = Field(None, description="响应元数据")


class ListResponse(BaseResponse):
    """返回集合的响应，total 为本次返回的条目数"""

    total: int = Field(default=0, description="条目数量")
