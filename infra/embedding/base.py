"""
文本嵌入提供商基类
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional


class EmbeddingProvider(ABC):
    """文本嵌入提供商抽象基类"""

    model: str
    dimension: int

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """
        生成单个文本的向量 (抽象方法)

        返回:
            list[float]: 固定维度的向量
        """
        pass

    @abstractmethod
    async def embed_batch(self, texts: Sequence[str]) -> list[Optional[list[float]]]:
        """
        批量生成向量 (抽象方法)

        返回值与输入按位置一一对应，格式错误的向量以 None 保留在原位置，由调用方检测。
        """
        pass
