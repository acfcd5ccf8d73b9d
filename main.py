"""
FastAPI主应用入口

该模块是整个API服务的入口点，负责创建FastAPI应用实例、
注册路由器、配置中间件和异常处理。
"""

import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import app_config
from controllers import app_router, __version__
from infra.db import close_db_connections
from libs.exceptions import BaseHTTPException
from utils import get_component_logger, configure_logging, to_isoformat

# 配置日志
logger = get_component_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时执行
    configure_logging()
    logger.info(f"{app_config.APP_NAME} 启动, 环境: {app_config.APP_ENV}")

    yield
    # 关闭时执行
    await close_db_connections()


# 创建FastAPI应用
app = FastAPI(
    title="商品推荐服务API",
    description="商品目录向量同步、相似度检索与行业推荐",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 全局异常处理
@app.exception_handler(BaseHTTPException)
async def api_exception_handler(_, exc: BaseHTTPException):
    """处理自定义API异常"""
    return JSONResponse(
        status_code=exc.http_status_code,
        content={
            **exc.data,
            "timestamp": to_isoformat()
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """处理未捕获的异常"""
    logger.error(f"未捕获异常: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "code": 500,
            "message": "INTERNAL_SERVER_ERROR",
            "detail": "服务器内部错误",
            "path": request.url.path,
            "timestamp": to_isoformat()
        }
    )


# 注册路由器
app.include_router(app_router, prefix="/v1")


# 根路径健康检查
@app.get("/")
async def root():
    """根路径健康检查"""
    return {
        "service": app_config.APP_NAME,
        "status": "运行中",
        "version": __version__,
        "docs": "/docs"
    }


def main():
    """Main entry point for the application."""
    uvicorn.run(
        "main:app",
        host=app_config.APP_HOST,
        port=app_config.APP_PORT,
        reload=app_config.DEBUG,
        log_level=app_config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
