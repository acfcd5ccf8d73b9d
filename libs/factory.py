"""
服务组装工厂

基于配置延迟构建并缓存适配器、核心组件与服务实例。
配置只在此处读取，下游组件全部通过构造参数接收。
"""

from typing import Optional

from config import AppConfig, app_config
from core.catalog import CatalogIngestionPipeline, ProductSearchService, ProductVectorStore
from core.recommendation import create_strategy
from infra.db import get_session_factory
from infra.ecommerce import ShopifyCatalogClient
from infra.embedding import OpenAIEmbeddingProvider
from infra.llm import OpenAITextGenerator
from libs.constants import EMBEDDING_DIMENSION
from services import CatalogService, HaircareService, RecommendationService
from utils import get_component_logger

logger = get_component_logger(__name__, "ServiceFactory")


class ServiceFactory:
    """
    延迟初始化服务的工厂。

    实例会缓存已创建的组件，避免重复构建（例如目录同步锁必须在进程内唯一）。
    """

    def __init__(self, config: AppConfig):
        self.config = config
        self._store: Optional[ProductVectorStore] = None
        self._embedder: Optional[OpenAIEmbeddingProvider] = None
        self._text_generator: Optional[OpenAITextGenerator] = None
        self._catalog_source: Optional[ShopifyCatalogClient] = None
        self._catalog_service: Optional[CatalogService] = None
        self._recommendation_services: dict[str, RecommendationService] = {}

    def get_store(self) -> ProductVectorStore:
        if self._store is None:
            self._store = ProductVectorStore(get_session_factory())
        return self._store

    def get_embedder(self) -> OpenAIEmbeddingProvider:
        """
        异常:
            ValueError: 配置的嵌入维度与数据库向量列维度不一致
        """
        if self._embedder is None:
            if self.config.EMBEDDING_DIMENSION != EMBEDDING_DIMENSION:
                raise ValueError(
                    f"EMBEDDING_DIMENSION={self.config.EMBEDDING_DIMENSION} 与数据库向量列维度 {EMBEDDING_DIMENSION} 不一致"
                )
            self._embedder = OpenAIEmbeddingProvider(
                api_key=self.config.OPENAI_API_KEY,
                model=self.config.EMBEDDING_MODEL,
                dimension=self.config.EMBEDDING_DIMENSION,
                timeout=self.config.OPENAI_TIMEOUT,
                max_retries=self.config.OPENAI_MAX_RETRIES,
                base_url=self.config.OPENAI_BASE_URL,
            )
        return self._embedder

    def get_text_generator(self) -> OpenAITextGenerator:
        if self._text_generator is None:
            self._text_generator = OpenAITextGenerator(
                api_key=self.config.OPENAI_API_KEY,
                model=self.config.CHAT_MODEL,
                timeout=self.config.OPENAI_TIMEOUT,
                max_retries=self.config.OPENAI_MAX_RETRIES,
                base_url=self.config.OPENAI_BASE_URL,
            )
        return self._text_generator

    def get_catalog_source(self) -> ShopifyCatalogClient:
        if self._catalog_source is None:
            self._catalog_source = ShopifyCatalogClient(
                store_domain=self.config.SHOPIFY_STORE_DOMAIN,
                api_version=self.config.SHOPIFY_API_VERSION,
                access_token=self.config.SHOPIFY_ADMIN_TOKEN,
                page_size=self.config.SHOPIFY_PAGE_SIZE,
                timeout=self.config.SHOPIFY_TIMEOUT,
            )
        return self._catalog_source

    def get_search_service(self) -> ProductSearchService:
        return ProductSearchService(self.get_embedder(), self.get_store())

    def get_catalog_service(self) -> CatalogService:
        if self._catalog_service is None:
            source = self.get_catalog_source()
            pipeline = CatalogIngestionPipeline(
                source=source,
                embedder=self.get_embedder(),
                store=self.get_store(),
                batch_size=self.config.INGEST_BATCH_SIZE,
                max_products=self.config.MAX_CATALOG_PRODUCTS,
                request_delay=self.config.CATALOG_REQUEST_DELAY,
                retry_delay=self.config.EMBEDDING_RETRY_DELAY,
                max_text_length=self.config.EMBEDDING_TEXT_MAX_LENGTH,
                channel_id=self.config.SHOPIFY_SALES_CHANNEL_ID,
                status=self.config.SHOPIFY_PRODUCT_STATUS,
            )
            self._catalog_service = CatalogService(
                pipeline=pipeline,
                search_service=self.get_search_service(),
                store=self.get_store(),
                source=source,
                default_limit=self.config.SEARCH_DEFAULT_LIMIT,
                max_limit=self.config.SEARCH_MAX_LIMIT,
            )
            logger.info("目录服务初始化完成")
        return self._catalog_service

    def get_recommendation_service(self, industry: Optional[str] = None) -> RecommendationService:
        industry = (industry or self.config.RECOMMENDATION_INDUSTRY).strip().lower()
        if industry not in self._recommendation_services:
            self._recommendation_services[industry] = RecommendationService(
                strategy=create_strategy(industry, self.get_text_generator()),
                search_service=self.get_search_service(),
                store=self.get_store(),
            )
            logger.info(f"推荐服务初始化完成: industry={industry}")
        return self._recommendation_services[industry]

    def get_haircare_service(self) -> HaircareService:
        return HaircareService(self.get_recommendation_service("haircare"))


service_factory = ServiceFactory(app_config)
