"""
系统常量模块

集中管理跨模块共享的常量。
"""


class StatusConstants:
    """健康检查状态常量"""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


# 数据库向量列维度，与嵌入模型输出一致
EMBEDDING_DIMENSION = 1536

# 推荐步骤描述生成失败时使用的兜底文案
FALLBACK_STEP_DESCRIPTION = "Complete the {step} step using the recommended products."
