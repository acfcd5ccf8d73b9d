"""
目录同步脚本

按需或由定时任务（cron）触发一次完整目录同步。
同步记录了错误或目录拉取失败时以非零状态码退出。

用法:
    python scripts/sync_catalog.py
"""

import asyncio
from pathlib import Path
import sys

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from infra.db import close_db_connections
from libs.exceptions import BaseHTTPException
from libs.factory import service_factory
from utils import get_component_logger, configure_logging

logger = get_component_logger(__name__, "SyncCatalog")


async def sync() -> int:
    """
    执行目录同步

    返回:
        int: 进程退出码
    """
    try:
        result = await service_factory.get_catalog_service().sync_catalog()
    except BaseHTTPException as e:
        logger.error(f"目录同步失败: {e.detail}")
        return 1
    except ValueError as e:
        logger.error(f"配置错误: {e}")
        return 1
    finally:
        await close_db_connections()

    logger.info(f"{result.status}: {result.message}")
    for error in result.errors:
        logger.error(error)

    return 1 if result.errors else 0


def main():
    configure_logging()
    sys.exit(asyncio.run(sync()))


if __name__ == "__main__":
    main()
