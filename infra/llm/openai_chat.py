"""
OpenAI 文本生成实现

提供推荐步骤描述的生成调用。
"""

from collections.abc import Sequence

import openai
from langfuse import observe
from openai.types.chat import ChatCompletionMessageParam

from libs.exceptions import TextGenerationException
from utils import get_component_logger
from .base import TextGenerator
from .entities import ChatMessage, ChatCompletion, TokenUsage

logger = get_component_logger(__name__, "OpenAIChat")


class OpenAITextGenerator(TextGenerator):
    """OpenAI 对话模型实现类"""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        max_retries: int = 0,
        base_url: str | None = None,
    ):
        """
        初始化OpenAI文本生成器

        参数:
            api_key: OpenAI API 密钥
            model: 默认对话模型
            timeout: 请求超时时间（秒）
            max_retries: SDK内部重试次数
            base_url: 兼容接口地址
        """
        self.model = model
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

    @observe(name="text_generation", as_type="generation")
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        max_tokens: int | None = None,
        temperature: float = 0.7,
        model: str | None = None,
    ) -> ChatCompletion:
        """
        发送对话请求到OpenAI

        异常:
            TextGenerationException: 调用失败，或返回文本为空
        """
        params: list[ChatCompletionMessageParam] = [
            {"role": message.role, "content": message.content}
            for message in messages
        ]

        try:
            response = await self.client.chat.completions.create(
                model=model or self.model,
                messages=params,
                temperature=temperature,
                max_completion_tokens=max_tokens,
            )
        except (openai.APIConnectionError, openai.RateLimitError, openai.InternalServerError) as e:
            logger.warning(f"文本生成调用失败（可重试）: {e!r}")
            raise TextGenerationException(repr(e), retriable=True) from e
        except openai.OpenAIError as e:
            logger.error(f"文本生成调用失败: {e!r}")
            raise TextGenerationException(repr(e)) from e

        if not response.choices:
            raise TextGenerationException("响应中没有候选结果")

        choice = response.choices[0]
        text = (choice.message.content or "").strip()
        if not text:
            raise TextGenerationException("返回文本为空")

        usage = None
        if response.usage:
            usage = TokenUsage(
                input_tokens=response.usage.prompt_tokens,
                output_tokens=response.usage.completion_tokens,
            )

        return ChatCompletion(text=text, finish_reason=choice.finish_reason, usage=usage)
