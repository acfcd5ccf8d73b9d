"""
配置包

提供服务的统一配置实例 app_config。
"""

from .app import AppConfig

app_config = AppConfig()

__all__ = ["AppConfig", "app_config"]
