"""
数据库连接管理

该模块提供PostgreSQL（pgvector）连接池和会话管理功能。
引擎与会话工厂在首次使用时创建，并在进程内复用。
"""

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)
from sqlalchemy import text

from config import app_config
from utils import get_component_logger

logger = get_component_logger(__name__, "Database")

# 全局引擎实例
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    获取数据库引擎实例

    返回:
        AsyncEngine: SQLAlchemy异步引擎
    """
    global _engine

    if _engine is None:
        logger.info(f"初始化PostgreSQL连接: {app_config.DB_HOST}:{app_config.DB_PORT}/{app_config.DB_NAME}")

        _engine = create_async_engine(
            app_config.postgres_url,
            # 连接池配置
            pool_size=app_config.SQLALCHEMY_POOL_SIZE,
            max_overflow=app_config.SQLALCHEMY_MAX_OVERFLOW,
            pool_pre_ping=app_config.SQLALCHEMY_POOL_PRE_PING,
            pool_recycle=app_config.SQLALCHEMY_POOL_RECYCLE,
            connect_args={
                "command_timeout": app_config.SQLALCHEMY_COMMAND_TIMEOUT,
                "server_settings": {
                    "application_name": app_config.APP_NAME,
                }
            },
            echo=app_config.DEBUG,
        )

        logger.info("PostgreSQL引擎初始化完成")

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    获取会话工厂

    返回:
        async_sessionmaker: 会话工厂
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )

    return _session_factory


async def close_db_connections():
    """关闭数据库连接"""
    global _engine, _session_factory

    if _engine:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("数据库连接已关闭")


async def test_db_connection() -> bool:
    """
    测试数据库连接及 pgvector 扩展是否可用

    返回:
        bool: 连接是否成功且扩展已安装
    """
    try:
        async with get_engine().connect() as conn:
            result = await conn.execute(
                text("SELECT COUNT(*) FROM pg_extension WHERE extname = 'vector'")
            )
            installed = result.scalar_one()
            if not installed:
                logger.warning("数据库未安装 pgvector 扩展")
            return installed == 1
    except Exception as e:
        logger.error(f"数据库连接测试失败: {e}")
        return False
