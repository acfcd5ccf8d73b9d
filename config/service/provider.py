"""
模型提供商配置模块

包含OpenAI嵌入模型与对话模型的配置。
"""

from typing import Optional

from pydantic import Field, NonNegativeInt, PositiveInt
from pydantic_settings import BaseSettings


class OpenAIConfig(BaseSettings):
    """
    OpenAI 提供商配置类
    """

    OPENAI_API_KEY: str = Field(
        description="OpenAI API 密钥，用于访问嵌入与 GPT 系列模型",
        default="",
    )

    OPENAI_BASE_URL: Optional[str] = Field(
        description="OpenAI 兼容接口地址，为空时使用官方地址",
        default=None,
    )

    OPENAI_TIMEOUT: PositiveInt = Field(
        description="OpenAI 请求超时时间（秒）",
        default=30,
    )

    OPENAI_MAX_RETRIES: NonNegativeInt = Field(
        description="OpenAI SDK 内部重试次数，同步流程自行控制重试时保持为0",
        default=0,
    )

    EMBEDDING_MODEL: str = Field(
        description="文本嵌入模型名称",
        default="text-embedding-3-small",
    )

    EMBEDDING_DIMENSION: PositiveInt = Field(
        description="嵌入向量维度，必须与数据库向量列一致",
        default=1536,
    )

    CHAT_MODEL: str = Field(
        description="生成推荐步骤描述使用的对话模型",
        default="gpt-4o-mini",
    )
