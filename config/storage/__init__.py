"""
存储配置模块

包含PostgreSQL（pgvector扩展）相关配置。
"""

from typing import Optional

from pydantic import Field, NonNegativeInt, PositiveInt
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    """
    存储系统配置类
    """
    DB_HOST: str = Field(
        description="PostgreSQL 服务器主机地址",
        default="localhost",
    )

    DB_PORT: PositiveInt = Field(
        description="PostgreSQL 服务器端口号",
        default=5432,
    )

    DB_NAME: str = Field(
        description="PostgreSQL 数据库名称",
        default="catalog",
    )

    POSTGRES_USER: str = Field(
        description="PostgreSQL 数据库用户名",
        default="postgres",
    )

    POSTGRES_PWD: Optional[str] = Field(
        description="PostgreSQL 数据库密码",
        default=None,
    )

    SQLALCHEMY_POOL_SIZE: NonNegativeInt = Field(
        description="PostgreSQL 数据库连接池大小",
        default=10,
    )

    SQLALCHEMY_MAX_OVERFLOW: NonNegativeInt = Field(
        description="PostgreSQL 数据库连接池最大溢出大小",
        default=20,
    )

    SQLALCHEMY_POOL_RECYCLE: NonNegativeInt = Field(
        description="PostgreSQL 数据库连接池回收时间",
        default=3600,
    )

    SQLALCHEMY_POOL_PRE_PING: bool = Field(
        description="PostgreSQL 数据库连接池预 ping",
        default=True,
    )

    SQLALCHEMY_COMMAND_TIMEOUT: NonNegativeInt = Field(
        description="PostgreSQL 数据库命令超时时间（秒）",
        default=30,
    )

    @property
    def postgres_url(self) -> str:
        """构建PostgreSQL连接URL"""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PWD or ''}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


class StorageConfig(DatabaseConfig):
    """
    统一存储配置

    向量数据与商品数据同表存储在PostgreSQL中（pgvector）。
    """
    pass
