"""
Alembic环境配置

该文件配置Alembic迁移环境，支持命令行异步迁移与脚本共享连接两种方式。
"""

import asyncio
from logging.config import fileConfig
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from config import app_config
from models import Base

# Alembic Config 对象，提供 .ini 文件中的配置
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# autogenerate 使用的元数据
metadata = Base.metadata


def run_migrations_offline():
    """离线模式：只生成SQL，不连接数据库"""
    context.configure(
        url=app_config.postgres_url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(connection=connection, target_metadata=metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations():
    """创建异步引擎并在其连接上运行迁移"""
    cfg = config.get_section(config.config_ini_section) or {}
    cfg["sqlalchemy.url"] = app_config.postgres_url

    connectable = async_engine_from_config(
        cfg,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online():
    """在线模式"""
    connectable = config.attributes.get("connection", None)

    if connectable is None:
        # 命令行调用，没有现成连接
        asyncio.run(run_async_migrations())
    else:
        # 脚本调用，复用传入的连接
        do_run_migrations(connectable)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
