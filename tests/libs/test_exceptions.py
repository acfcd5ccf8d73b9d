import pytest

from libs.exceptions import (
    AdapterException,
    BaseHTTPException,
    CatalogSourceException,
    CatalogSyncInProgressException,
    CatalogValidationException,
    EmbeddingException,
    InvalidSearchLimitException,
    ProductNotFoundException,
    RecommendationException,
    StoreException,
    TextGenerationException,
    UnsupportedIndustryException,
)


class TestExceptionPayloads:

    @pytest.mark.parametrize("exc, status_code, code", [
        (ProductNotFoundException(), 404, 210001),
        (CatalogValidationException("q", "empty"), 400, 210002),
        (InvalidSearchLimitException(0, 1, 100), 400, 210003),
        (UnsupportedIndustryException("pets"), 400, 210004),
        (CatalogSyncInProgressException(), 409, 210005),
        (RecommendationException("boom"), 500, 210006),
        (StoreException("count", "closed"), 500, 100100),
        (CatalogSourceException("HTTP 502"), 503, 300100),
        (EmbeddingException(), 503, 300200),
        (TextGenerationException(), 503, 300300),
    ])
    def test_status_and_code(self, exc, status_code, code):
        assert isinstance(exc, BaseHTTPException)
        assert exc.status_code == status_code
        assert exc.data["code"] == code
        assert exc.data["detail"] == exc.detail

    def test_default_not_found_detail(self):
        assert ProductNotFoundException().detail == "No products found"

    def test_limit_detail_mentions_bounds(self):
        detail = InvalidSearchLimitException(101, 1, 100).detail
        assert "1" in detail and "100" in detail and "101" in detail


class TestAdapterException:

    def test_retriable_flag(self):
        assert CatalogSourceException("timeout", retriable=True).retriable is True
        assert EmbeddingException("bad key").retriable is False

    def test_detail_names_source(self):
        assert EmbeddingException("quota").detail == "embedding 调用失败: quota"
        assert AdapterException().detail == "adapter 调用失败"

    def test_store_exception_records_operation(self):
        exc = StoreException("upsert", "connection reset")
        assert exc.operation == "upsert"
        assert "connection reset" in exc.detail
