"""
Shopify 商品目录配置模块
"""

from typing import Optional

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings


class ShopifyConfig(BaseSettings):
    """
    Shopify Admin GraphQL API 配置类
    """

    SHOPIFY_STORE_DOMAIN: str = Field(
        description="店铺域名，例如 example.myshopify.com",
        default="",
    )

    SHOPIFY_API_VERSION: str = Field(
        description="Admin API 版本，例如 2024-10",
        default="2024-10",
    )

    SHOPIFY_ADMIN_TOKEN: str = Field(
        description="Admin API 访问令牌",
        default="",
    )

    SHOPIFY_SALES_CHANNEL_ID: Optional[str] = Field(
        description="仅同步发布到该销售渠道的商品，为空时不过滤渠道",
        default=None,
    )

    SHOPIFY_PRODUCT_STATUS: str = Field(
        description="同步的商品状态过滤条件",
        default="active",
    )

    SHOPIFY_PAGE_SIZE: PositiveInt = Field(
        description="每页拉取的商品数量（上限250）",
        default=250,
        le=250,
    )

    SHOPIFY_TIMEOUT: PositiveInt = Field(
        description="Shopify 请求超时时间（秒）",
        default=30,
    )
