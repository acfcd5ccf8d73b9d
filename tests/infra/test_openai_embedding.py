"""
OpenAI Embedding 提供商测试

SDK 客户端使用 mock，验证结果排序、向量校验与错误分类。
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import openai
import pytest

from infra.embedding import OpenAIEmbeddingProvider, is_valid_vector
from libs.exceptions import EmbeddingException


def embedding_response(*vectors):
    data = [SimpleNamespace(index=i, embedding=v) for i, v in enumerate(vectors)]
    return SimpleNamespace(data=list(reversed(data)))


@pytest.fixture
def provider():
    provider = OpenAIEmbeddingProvider(api_key="sk-test", dimension=3)
    provider.client = AsyncMock()
    return provider


class TestIsValidVector:

    def test_valid(self):
        assert is_valid_vector([0.1, 2, -3.5], dimension=3)

    def test_rejects_malformed(self):
        assert not is_valid_vector(None)
        assert not is_valid_vector([])
        assert not is_valid_vector([0.1, "x"])
        assert not is_valid_vector([True, 0.1])
        assert not is_valid_vector([float("nan"), 0.1])
        assert not is_valid_vector([0.1, 0.2], dimension=3)


class TestOpenAIEmbeddingProvider:

    @pytest.mark.asyncio
    async def test_embed_single(self, provider):
        provider.client.embeddings.create.return_value = embedding_response([0.1, 0.2, 0.3])

        assert await provider.embed("argan oil") == [0.1, 0.2, 0.3]

    @pytest.mark.asyncio
    async def test_embed_batch_restores_input_order(self, provider):
        provider.client.embeddings.create.return_value = embedding_response([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])

        vectors = await provider.embed_batch(["first", "second"])

        assert vectors == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]

    @pytest.mark.asyncio
    async def test_malformed_element_becomes_none(self, provider):
        provider.client.embeddings.create.return_value = embedding_response([1.0, 0.0, 0.0], [1.0, 0.0])

        vectors = await provider.embed_batch(["first", "second"])

        assert vectors == [[1.0, 0.0, 0.0], None]

    @pytest.mark.asyncio
    async def test_count_mismatch_raises(self, provider):
        provider.client.embeddings.create.return_value = embedding_response([1.0, 0.0, 0.0])

        with pytest.raises(EmbeddingException):
            await provider.embed_batch(["first", "second"])

    @pytest.mark.asyncio
    async def test_empty_batch_skips_call(self, provider):
        assert await provider.embed_batch([]) == []
        provider.client.embeddings.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_error_is_retriable(self, provider):
        request = httpx.Request("POST", "https://api.openai.com/v1/embeddings")
        provider.client.embeddings.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(EmbeddingException) as exc_info:
            await provider.embed("argan oil")

        assert exc_info.value.retriable is True
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_other_sdk_error_is_not_retriable(self, provider):
        provider.client.embeddings.create.side_effect = openai.OpenAIError("invalid api key")

        with pytest.raises(EmbeddingException) as exc_info:
            await provider.embed("argan oil")

        assert exc_info.value.retriable is False

    @pytest.mark.asyncio
    async def test_invalid_single_vector_raises(self, provider):
        provider.client.embeddings.create.return_value = embedding_response([0.1, None, 0.3])

        with pytest.raises(EmbeddingException):
            await provider.embed("argan oil")
