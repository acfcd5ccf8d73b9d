"""
测试公共夹具

外部服务全部使用内存实现替代:
- InMemoryVectorStore: 与数据库upsert相同合并规则的内存向量存储
- FakeCatalogSource: 按预设分页返回商品的目录源
- FakeEmbedder: 返回确定性向量、可注入失败的嵌入提供商
- FakeTextGenerator: 可按步骤注入失败的文本生成器
"""

import math
from collections.abc import Sequence
from typing import Optional

import pytest

from infra.ecommerce import CatalogSource
from infra.embedding import EmbeddingProvider
from infra.llm import ChatCompletion, ChatMessage, TextGenerator
from libs.exceptions import EmbeddingException, StoreException
from models import CatalogPage, Product, ProductWithSimilarity, SalesChannel


def build_product(external_id: str, **fields) -> Product:
    fields.setdefault("title", f"Product {external_id}")
    fields.setdefault("description", f"Description of {external_id}")
    return Product(external_id=external_id, **fields)


class InMemoryVectorStore:
    """内存向量存储，合并规则与 ProductRepository 的upsert语句一致"""

    def __init__(self):
        self.rows: dict[str, tuple[Product, list[float]]] = {}
        self.fail_ids: set[str] = set()
        self.query_count = 0

    async def upsert(self, product: Product, embedding: Sequence[float]) -> None:
        if product.external_id in self.fail_ids:
            raise StoreException("upsert", "connection reset")

        previous = self.rows.get(product.external_id)
        if previous:
            old = previous[0]
            product = product.model_copy(update={
                "category": product.category or old.category,
                "image": product.image or old.image,
                "price": product.price or old.price,
            })
        self.rows[product.external_id] = (product, list(embedding))

    async def find_by_similarity(self, embedding: Sequence[float], limit: int) -> list[ProductWithSimilarity]:
        self.query_count += 1

        def cosine(a, b):
            norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
            return sum(x * y for x, y in zip(a, b)) / norm if norm else 0.0

        scored = [
            ProductWithSimilarity(**product.model_dump(), similarity=cosine(vector, embedding))
            for product, vector in self.rows.values()
        ]
        scored.sort(key=lambda item: (-item.similarity, item.external_id))
        return scored[:limit]

    async def find_by_ids(self, ids: Sequence[str]) -> list[Product]:
        if not ids:
            return []
        self.query_count += 1
        return [self.rows[i][0] for i in ids if i in self.rows]

    async def find_by_category(self, category: str) -> list[Product]:
        self.query_count += 1
        return [
            product for product, _ in self.rows.values()
            if (product.category or "").lower() == category.lower()
        ]

    async def count(self) -> int:
        self.query_count += 1
        return len(self.rows)


class FakeCatalogSource(CatalogSource):

    def __init__(self, pages: Optional[list[CatalogPage]] = None, channels: Optional[list[SalesChannel]] = None):
        self.pages = pages or []
        self.channels = channels or []
        self.calls: list[tuple] = []

    async def fetch_page(self, cursor=None, channel_id=None, status=None) -> CatalogPage:
        self.calls.append((cursor, channel_id, status))
        index = len(self.calls) - 1
        if index >= len(self.pages):
            return CatalogPage(products=[], has_next_page=False)
        return self.pages[index]

    async def list_channels(self) -> list[SalesChannel]:
        return list(self.channels)


class FakeEmbedder(EmbeddingProvider):
    """
    确定性嵌入

    failures 中的每一项对应一次 embed_batch 调用：True 表示该次调用失败。
    invalid_positions 中的位置返回 None。
    """

    model = "fake-embedding"
    dimension = 3

    def __init__(self):
        self.failures: list[bool] = []
        self.invalid_positions: set[int] = set()
        self.batch_calls: list[list[str]] = []
        self.vectors: dict[str, list[float]] = {}

    def vector_for(self, text: str) -> list[float]:
        if text in self.vectors:
            return self.vectors[text]
        return [float(len(text) % 7 + 1), 1.0, 0.5]

    async def embed(self, text: str) -> list[float]:
        return self.vector_for(text)

    async def embed_batch(self, texts: Sequence[str]) -> list[Optional[list[float]]]:
        call_index = len(self.batch_calls)
        self.batch_calls.append(list(texts))
        if call_index < len(self.failures) and self.failures[call_index]:
            raise EmbeddingException("upstream timeout", retriable=True)
        return [
            None if position in self.invalid_positions else self.vector_for(text)
            for position, text in enumerate(texts)
        ]


class FakeTextGenerator(TextGenerator):

    def __init__(self):
        self.failing_steps: set[str] = set()
        self.empty_steps: set[str] = set()
        self.prompts: list[str] = []

    async def complete(self, messages: Sequence[ChatMessage], max_tokens=None, temperature=0.7, model=None):
        prompt = messages[-1].content
        self.prompts.append(prompt)
        for step in self.failing_steps:
            if f'"{step}"' in prompt:
                raise RuntimeError("generation failed")
        for step in self.empty_steps:
            if f'"{step}"' in prompt:
                return ChatCompletion(text="   ")
        return ChatCompletion(text="Use these products daily.", finish_reason="stop")


@pytest.fixture
def make_product():
    return build_product


@pytest.fixture
def memory_store():
    return InMemoryVectorStore()


@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def fake_text_generator():
    return FakeTextGenerator()


@pytest.fixture
def catalog_source():
    """返回一个按页构建 FakeCatalogSource 的工厂"""
    def factory(pages=None, channels=None):
        return FakeCatalogSource(pages, channels)
    return factory


@pytest.fixture
def haircare_catalog():
    """2个洗发、2个护发、3个其他商品"""
    return [
        build_product("gid://1", title="Hydrating Shampoo", category="Shampoo", tags=["shampoo"]),
        build_product("gid://2", title="Color Safe Shampoo", category="Color Shampoo", tags=["shampoo"]),
        build_product("gid://3", title="Silk Conditioner", category="Conditioner", tags=["conditioner"]),
        build_product("gid://4", title="Repair Conditioner", category="Deep Conditioner", tags=["conditioner"]),
        build_product("gid://5", title="Anti-Frizz Serum", category="Serum", tags=["frizz"]),
        build_product("gid://6", title="Texture Spray", category="Styling", tags=["styling"]),
        build_product("gid://7", title="Bond Mask", category=None, tags=[]),
    ]
