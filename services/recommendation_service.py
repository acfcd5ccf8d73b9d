"""
推荐服务模块

根据客户画像检索候选商品，并交由行业策略生成推荐流程。
"""

from core.catalog import ProductSearchService, ProductVectorStore
from core.recommendation import BaseRecommendationStrategy
from libs.exceptions import (
    BaseHTTPException,
    CatalogValidationException,
    ProductNotFoundException,
    RecommendationException,
)
from models import CustomerProfile, Product, RecommendationResponse
from utils import get_component_logger

logger = get_component_logger(__name__, "RecommendationService")


class RecommendationService:
    """推荐服务类"""

    def __init__(
        self,
        strategy: BaseRecommendationStrategy,
        search_service: ProductSearchService,
        store: ProductVectorStore,
    ):
        self.strategy = strategy
        self.search_service = search_service
        self.store = store

    def get_industry(self) -> str:
        return self.strategy.get_industry()

    async def _find_candidates(self, profile: CustomerProfile) -> list[Product]:
        query = self.strategy.build_search_query(profile).strip()
        if not query:
            raise CatalogValidationException("profile", "画像中没有可用于检索的内容")
        logger.debug(f"检索语句: {query}")

        results = await self.search_service.search(query, self.strategy.search_limit)
        if not results:
            logger.warning("画像没有检索到相似商品")
            raise ProductNotFoundException()

        products = await self.store.find_by_ids([result.external_id for result in results])
        if not products:
            logger.warning("检索结果对应的商品不存在")
            raise ProductNotFoundException()

        # find_by_ids 不保证顺序，按相似度排名恢复顺序
        rank = {result.external_id: index for index, result in enumerate(results)}
        return sorted(products, key=lambda product: rank.get(product.external_id, len(rank)))

    async def generate_recommendation(self, profile: CustomerProfile) -> RecommendationResponse:
        """
        生成个性化推荐

        异常:
            CatalogValidationException: 画像为空，无法生成检索语句
            ProductNotFoundException: 检索或按ID查询没有可用商品
            AdapterException / StoreException: 检索阶段的外部调用失败
            RecommendationException: 其他未预期错误
        """
        logger.debug(f"生成 {self.get_industry()} 推荐")
        try:
            products = await self._find_candidates(profile)
            return await self.strategy.generate_recommendation(profile, products)
        except BaseHTTPException:
            raise
        except Exception as e:
            logger.error(f"推荐生成失败: {e}", exc_info=True)
            raise RecommendationException(str(e)) from e
