"""
相似度检索服务测试
"""

from unittest.mock import AsyncMock

import pytest

from core.catalog import ProductSearchService
from libs.exceptions import EmbeddingException


class TestProductSearchService:

    @pytest.mark.asyncio
    async def test_embeds_query_and_passes_limit(self, fake_embedder):
        store = AsyncMock()
        store.find_by_similarity.return_value = []
        service = ProductSearchService(fake_embedder, store)

        results = await service.search("dry scalp", 7)

        assert results == []
        store.find_by_similarity.assert_awaited_once_with(fake_embedder.vector_for("dry scalp"), 7)

    @pytest.mark.asyncio
    async def test_results_ordered_by_similarity(self, fake_embedder, memory_store, make_product):
        await memory_store.upsert(make_product("gid://far"), [0.0, 1.0, 0.0])
        await memory_store.upsert(make_product("gid://near"), [1.0, 0.1, 0.0])
        await memory_store.upsert(make_product("gid://mid"), [1.0, 1.0, 0.0])
        fake_embedder.vectors["shine"] = [1.0, 0.0, 0.0]
        service = ProductSearchService(fake_embedder, memory_store)

        results = await service.search("shine", 2)

        assert [r.external_id for r in results] == ["gid://near", "gid://mid"]
        assert results[0].similarity >= results[1].similarity

    @pytest.mark.asyncio
    async def test_embedding_failure_propagates(self, memory_store):
        embedder = AsyncMock()
        embedder.embed.side_effect = EmbeddingException("quota", retriable=True)
        service = ProductSearchService(embedder, memory_store)

        with pytest.raises(EmbeddingException):
            await service.search("shine", 5)
        assert memory_store.query_count == 0
