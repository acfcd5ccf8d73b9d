"""
商品存储库测试

upsert 与相似度检索语句编译为 PostgreSQL 方言后检查关键子句；
查询方法使用 mock 会话验证结果映射。
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from models import Product
from repositories import ProductRepository


def compile_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestUpsertStatement:

    @pytest.fixture
    def sql(self):
        product = Product(external_id="gid://1", title="Mask", tags=["repair"], category="Treatment")
        return compile_sql(ProductRepository.build_upsert_statement(product, [0.1, 0.2, 0.3]))

    def test_conflicts_on_external_id(self, sql):
        assert "ON CONFLICT (external_id) DO UPDATE" in sql

    def test_optional_fields_use_non_empty_incoming_value(self, sql):
        for column in ("category", "image", "price"):
            assert f"coalesce(nullif(excluded.{column}" in sql
            assert f"products.{column})" in sql

    def test_created_at_is_never_written(self, sql):
        assert "created_at" not in sql
        assert "updated_at = now()" in sql


class TestSimilarityStatement:

    def test_orders_by_distance_then_id(self):
        sql = compile_sql(ProductRepository.build_similarity_statement([0.1, 0.2, 0.3], 5))

        order_by = sql.split("ORDER BY", 1)[1]
        assert "<=>" in order_by
        assert order_by.index("<=>") < order_by.index("products.external_id")
        assert "LIMIT" in order_by
        assert "AS similarity" in sql

    def test_vector_column_not_selected(self):
        sql = compile_sql(ProductRepository.build_similarity_statement([0.1, 0.2, 0.3], 5))
        select_clause = sql.split("FROM", 1)[0]
        assert "products.embedding," not in select_clause


class TestQueries:

    @pytest.mark.asyncio
    async def test_find_by_similarity_maps_rows(self):
        rows = [
            SimpleNamespace(
                external_id="gid://1", title="Mask", description=None, tags=None,
                category="Treatment", image=None, price="19.00", similarity=0.91,
            ),
        ]
        result = MagicMock()
        result.all.return_value = rows
        session = AsyncMock()
        session.execute.return_value = result

        products = await ProductRepository.find_by_similarity([0.1, 0.2, 0.3], 5, session)

        assert len(products) == 1
        assert products[0].external_id == "gid://1"
        assert products[0].description == ""
        assert products[0].tags == []
        assert products[0].similarity == pytest.approx(0.91)

    @pytest.mark.asyncio
    async def test_find_by_ids_empty_does_not_query(self):
        session = AsyncMock()

        assert await ProductRepository.find_by_ids([], session) == []
        session.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_count(self):
        result = MagicMock()
        result.scalar_one.return_value = 3
        session = AsyncMock()
        session.execute.return_value = result

        assert await ProductRepository.count(session) == 3

    @pytest.mark.asyncio
    async def test_errors_are_reraised(self):
        session = AsyncMock()
        session.execute.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await ProductRepository.find_by_category("serum", session)
