"""
基础设施相关异常

包含外部适配器（商品目录、嵌入、文本生成）与向量存储的异常定义。
"""

from .base import BaseHTTPException


class StoreException(BaseHTTPException):
    """向量存储读写异常"""
    code = 100100
    message = "STORE_ERROR"
    http_status_code = 500

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        detail = f"向量存储操作失败 (操作: {operation})"
        if reason:
            detail += f": {reason}"
        super().__init__(detail=detail)


class AdapterException(BaseHTTPException):
    """
    外部适配器异常基类

    属性:
        retriable: 是否为可重试错误（网络、超时、限流、上游5xx）
        source: 出错的适配器名称
    """
    code = 300000
    message = "ADAPTER_ERROR"
    http_status_code = 503
    source = "adapter"

    def __init__(self, reason: str = "", retriable: bool = False):
        self.retriable = retriable
        detail = f"{self.source} 调用失败"
        if reason:
            detail += f": {reason}"
        super().__init__(detail=detail)


class CatalogSourceException(AdapterException):
    """商品目录源调用异常"""
    code = 300100
    message = "CATALOG_SOURCE_ERROR"
    source = "catalog_source"


class EmbeddingException(AdapterException):
    """文本嵌入调用异常"""
    code = 300200
    message = "EMBEDDING_ERROR"
    source = "embedding"


class TextGenerationException(AdapterException):
    """文本生成调用异常"""
    code = 300300
    message = "TEXT_GENERATION_ERROR"
    source = "text_generation"
