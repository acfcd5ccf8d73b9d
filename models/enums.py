from enum import StrEnum


class IngestionStatus(StrEnum):
    """目录同步结果状态"""
    COMPLETED = "completed"       # 已完成（可能包含部分失败）
    NO_PRODUCTS = "no_products"   # 目录为空，无需处理


class Industry(StrEnum):
    """推荐策略行业"""
    HAIRCARE = "haircare"
    SKINCARE = "skincare"
