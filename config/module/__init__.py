"""
模块配置

包含目录同步、商品检索与推荐引擎的配置。
"""

from .catalog_config import CatalogConfig


class ModuleConfig(CatalogConfig):
    """
    模块统一配置
    """
    pass
