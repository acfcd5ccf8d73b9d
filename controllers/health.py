"""
健康检查端点

GET /health - 基础健康检查，包含数据库与 pgvector 扩展状态
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from config import app_config
from infra.db import test_db_connection
from libs.constants import StatusConstants
from utils import get_component_logger, to_isoformat

logger = get_component_logger(__name__, "HealthCheck")

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    基础健康检查

    数据库不可用时返回503
    """
    database_ok = await test_db_connection()
    status = StatusConstants.HEALTHY if database_ok else StatusConstants.UNHEALTHY
    if not database_ok:
        logger.warning("健康检查: 数据库不可用")

    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": status,
            "service": app_config.APP_NAME,
            "database": database_ok,
            "timestamp": to_isoformat()
        }
    )
