"""
Shopify 商品目录客户端

通过 Admin GraphQL API 分页拉取商品与销售渠道，只负责I/O和数据映射，不包含业务逻辑。
"""

import asyncio
from typing import Any, Optional

import aiohttp

from libs.exceptions import CatalogSourceException
from models import CatalogPage, Product, SalesChannel
from utils import ExternalClient, get_component_logger
from .base import CatalogSource

logger = get_component_logger(__name__, "ShopifyCatalogClient")


PRODUCTS_QUERY = """
query getProducts($cursor: String) {
  products(first: %(page_size)d, query: "%(filters)s", after: $cursor) {
    pageInfo { hasNextPage endCursor }
    nodes {
      id
      title
      description
      productType
      tags
      images(first: 1) { edges { node { url } } }
      variants(first: 1) { edges { node { price } } }
    }
  }
}
"""

PUBLICATIONS_QUERY = """
query getPublications {
  publications(first: 100) {
    nodes { id name }
  }
}
"""


class ShopifyCatalogClient(CatalogSource):
    """Shopify Admin GraphQL 目录源"""

    def __init__(
        self,
        store_domain: str,
        api_version: str,
        access_token: str,
        page_size: int = 250,
        timeout: float = 30.0,
    ):
        """
        初始化Shopify客户端

        参数:
            store_domain: 店铺域名
            api_version: Admin API 版本
            access_token: Admin API 访问令牌
            page_size: 每页商品数量
            timeout: 请求超时时间（秒）

        异常:
            ValueError: 缺少必要的Shopify配置
        """
        if not store_domain or not api_version or not access_token:
            raise ValueError("缺少必要的Shopify配置: SHOPIFY_STORE_DOMAIN / SHOPIFY_API_VERSION / SHOPIFY_ADMIN_TOKEN")

        self.endpoint = f"https://{store_domain}/admin/api/{api_version}/graphql.json"
        self.page_size = page_size
        self.timeout = timeout
        self.client = ExternalClient(config={"X-Shopify-Access-Token": access_token})

    @staticmethod
    def _build_filters(channel_id: Optional[str], status: Optional[str]) -> str:
        filters = []
        if channel_id:
            filters.append(f"publication_ids:{channel_id}")
        if status:
            filters.append(f"status:{status}")
        return " AND ".join(filters)

    async def _execute(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        执行GraphQL请求并返回data部分

        异常:
            CatalogSourceException: 网络、超时、上游5xx为可重试错误；4xx、GraphQL errors、响应格式错误为不可重试错误
        """
        try:
            payload = await self.client.make_request(
                "POST",
                self.endpoint,
                data={"query": query, "variables": variables or {}},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except aiohttp.ClientResponseError as e:
            retriable = e.status >= 500 or e.status == 429
            logger.error(f"Shopify请求返回错误状态: {e.status}, retriable={retriable}")
            raise CatalogSourceException(f"HTTP {e.status}: {e.message}", retriable=retriable) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Shopify请求失败: {e!r}")
            raise CatalogSourceException(repr(e), retriable=True) from e

        if not isinstance(payload, dict):
            raise CatalogSourceException("响应不是JSON对象")

        if payload.get("errors"):
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in payload["errors"]
            )
            raise CatalogSourceException(f"GraphQL errors: {messages}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise CatalogSourceException("响应缺少data字段")
        return data

    @staticmethod
    def _first_edge_value(connection: Optional[dict], key: str) -> Optional[str]:
        edges = (connection or {}).get("edges") or []
        if not edges:
            return None
        return (edges[0].get("node") or {}).get(key) or None

    def _to_product(self, node: dict[str, Any]) -> Product:
        tags = node.get("tags")
        return Product(
            external_id=node["id"],
            title=node.get("title") or "",
            description=node.get("description") or "",
            tags=tags if isinstance(tags, list) else [],
            category=node.get("productType") or None,
            image=self._first_edge_value(node.get("images"), "url"),
            price=self._first_edge_value(node.get("variants"), "price"),
        )

    async def fetch_page(
        self,
        cursor: Optional[str] = None,
        channel_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> CatalogPage:
        query = PRODUCTS_QUERY % {
            "page_size": self.page_size,
            "filters": self._build_filters(channel_id, status),
        }
        data = await self._execute(query, {"cursor": cursor})

        try:
            products = data["products"]
            page_info = products["pageInfo"]
            items = [self._to_product(node) for node in products["nodes"]]
        except (KeyError, TypeError) as e:
            raise CatalogSourceException(f"商品响应格式错误: {e!r}") from e

        logger.debug(f"拉取商品页完成: {len(items)} 个商品, has_next_page={page_info.get('hasNextPage')}")
        return CatalogPage(
            products=items,
            has_next_page=bool(page_info.get("hasNextPage")),
            end_cursor=page_info.get("endCursor"),
        )

    async def list_channels(self) -> list[SalesChannel]:
        logger.info("获取Shopify销售渠道...")
        data = await self._execute(PUBLICATIONS_QUERY)

        try:
            channels = [
                SalesChannel(id=node["id"], name=node["name"])
                for node in data["publications"]["nodes"]
            ]
        except (KeyError, TypeError) as e:
            raise CatalogSourceException(f"渠道响应格式错误: {e!r}") from e

        logger.info(
            f"获取到 {len(channels)} 个销售渠道: "
            + ", ".join(f"{channel.name} ({channel.id})" for channel in channels)
        )
        return channels
