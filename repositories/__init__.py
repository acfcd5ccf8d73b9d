"""
数据访问存储库

仅包含数据访问操作，会话由调用方管理。
"""

from .product_repo import ProductRepository

__all__ = ["ProductRepository"]
