"""
文本生成提供商基类

定义推荐步骤描述生成所使用的统一接口。
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .entities import ChatMessage, ChatCompletion


class TextGenerator(ABC):
    """文本生成提供商抽象基类"""

    @abstractmethod
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        max_tokens: int | None = None,
        temperature: float = 0.7,
        model: str | None = None,
    ) -> ChatCompletion:
        """
        发送对话请求 (抽象方法)

        参数:
            messages: 对话消息
            max_tokens: 最大输出token数
            temperature: 采样温度
            model: 模型名称，None表示使用默认模型

        返回:
            ChatCompletion: 文本、结束原因和token用量
        """
        pass
