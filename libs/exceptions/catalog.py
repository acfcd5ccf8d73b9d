"""
商品目录与推荐相关异常
"""

from .base import BaseHTTPException


class CatalogException(BaseHTTPException):
    """目录业务异常基类"""
    code = 210000
    message = "CATALOG_ERROR"
    http_status_code = 400


class ProductNotFoundException(CatalogException):
    """检索或按ID查询没有可用商品"""
    code = 210001
    message = "PRODUCT_NOT_FOUND"
    http_status_code = 404

    def __init__(self, detail: str = "No products found"):
        super().__init__(detail=detail)


class CatalogValidationException(CatalogException):
    """目录请求参数校验异常"""
    code = 210002
    message = "CATALOG_VALIDATION_ERROR"
    http_status_code = 400

    def __init__(self, field: str, reason: str):
        super().__init__(detail=f"参数 {field} 无效: {reason}")


class InvalidSearchLimitException(CatalogException):
    code = 210003
    message = "INVALID_SEARCH_LIMIT"
    http_status_code = 400

    def __init__(self, limit: int, minimum: int, maximum: int):
        super().__init__(detail=f"limit 必须在 {minimum} 到 {maximum} 之间，当前值: {limit}")


class UnsupportedIndustryException(CatalogException):
    code = 210004
    message = "UNSUPPORTED_INDUSTRY"
    http_status_code = 400

    def __init__(self, industry: str):
        super().__init__(detail=f"不支持的行业策略: {industry}")


class CatalogSyncInProgressException(CatalogException):
    """同一进程内已有目录同步在运行"""
    code = 210005
    message = "CATALOG_SYNC_IN_PROGRESS"
    http_status_code = 409

    def __init__(self):
        super().__init__(detail="目录同步正在进行中，请稍后重试")


class RecommendationException(CatalogException):
    """推荐生成异常"""
    code = 210006
    message = "RECOMMENDATION_ERROR"
    http_status_code = 500

    def __init__(self, reason: str = ""):
        detail = "推荐生成失败"
        if reason:
            detail += f": {reason}"
        super().__init__(detail=detail)
