"""
外部服务配置模块

包含OpenAI和Shopify等外部服务的配置。
"""

from .provider import OpenAIConfig
from .shopify_config import ShopifyConfig


class ServiceConfig(OpenAIConfig, ShopifyConfig):
    """
    外部服务统一配置
    """
    pass
