"""
OpenAI Embedding 提供商

调用 embeddings 接口生成文本向量。重试策略由调用方（目录同步流程）控制，
SDK 内部重试次数默认为0。
"""

import math
from collections.abc import Sequence
from typing import Any, Optional

import openai
from langfuse import observe

from libs.exceptions import EmbeddingException
from utils import get_component_logger
from .base import EmbeddingProvider

logger = get_component_logger(__name__, "OpenAIEmbedding")

# 可重试的错误类型（APIConnectionError 包含 APITimeoutError）
RETRIABLE_ERRORS = (
    openai.APIConnectionError,
    openai.RateLimitError,
    openai.InternalServerError,
)


def is_valid_vector(vector: Any, dimension: Optional[int] = None) -> bool:
    """
    校验向量是否为非空的有限数值列表

    参数:
        vector: 待校验向量
        dimension: 期望维度，None表示不校验维度
    """
    if not isinstance(vector, (list, tuple)) or not vector:
        return False
    if dimension is not None and len(vector) != dimension:
        return False
    return all(
        isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
        for value in vector
    )


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI 文本嵌入实现"""

    def __init__(
        self,
        api_key: str,
        model: str = "text-embedding-3-small",
        dimension: int = 1536,
        timeout: float = 30.0,
        max_retries: int = 0,
        base_url: Optional[str] = None,
    ):
        self.model = model
        self.dimension = dimension
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

    async def _create(self, payload: str | list[str]) -> list[Any]:
        try:
            response = await self.client.embeddings.create(
                model=self.model,
                input=payload,
                encoding_format="float"
            )
        except RETRIABLE_ERRORS as e:
            logger.warning(f"Embedding调用失败（可重试）: {e!r}")
            raise EmbeddingException(repr(e), retriable=True) from e
        except openai.OpenAIError as e:
            logger.error(f"Embedding调用失败: {e!r}")
            raise EmbeddingException(repr(e)) from e

        items = sorted(response.data or [], key=lambda item: item.index)
        return [item.embedding for item in items]

    @observe(name="embed_text")
    async def embed(self, text: str) -> list[float]:
        """
        生成单个文本的向量

        异常:
            EmbeddingException: 调用失败或返回的向量格式错误
        """
        logger.debug(f"生成embedding: {text[:50]}...")
        vectors = await self._create(text)

        if len(vectors) != 1 or not is_valid_vector(vectors[0], self.dimension):
            raise EmbeddingException("返回的向量格式错误")
        return list(vectors[0])

    @observe(name="embed_text_batch")
    async def embed_batch(self, texts: Sequence[str]) -> list[Optional[list[float]]]:
        """
        批量生成向量

        参数:
            texts: 文本列表

        返回:
            list: 与输入按位置对应的向量列表，格式错误的元素为 None

        异常:
            EmbeddingException: 调用失败或返回数量与输入数量不一致
        """
        if not texts:
            return []

        vectors = await self._create(list(texts))
        if len(vectors) != len(texts):
            raise EmbeddingException(f"返回向量数量不匹配: 期望 {len(texts)}, 实际 {len(vectors)}")

        result: list[Optional[list[float]]] = []
        for index, vector in enumerate(vectors):
            if is_valid_vector(vector, self.dimension):
                result.append(list(vector))
            else:
                logger.warning(f"第 {index} 个向量格式错误")
                result.append(None)

        logger.info(f"批量embedding生成完成: {len(result)} 个向量")
        return result
