"""
数据库迁移脚本

用法:
    python scripts/database.py                    # 升级到最新版本
    python scripts/database.py revision <message> # 生成迁移文件
    python scripts/database.py downgrade [rev]    # 回滚
"""

import asyncio
from pathlib import Path
import sys

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from alembic import command
from alembic.config import Config

from infra.db import get_engine, close_db_connections
from utils import get_component_logger, configure_logging

logger = get_component_logger(__name__, "Database")

ALEMBIC_INI = project_root / "migrations" / "alembic.ini"


def run_upgrade(connection, cfg, revision):
    """在给定连接上运行数据库迁移"""
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, revision)


def run_revision(connection, cfg, message):
    """在给定连接上运行迁移文件生成"""
    cfg.attributes["connection"] = connection
    command.revision(cfg, autogenerate=True, message=message)


def run_downgrade(connection, cfg, revision):
    """在给定连接上运行数据库回滚"""
    cfg.attributes["connection"] = connection
    command.downgrade(cfg, revision)


async def run_command(action, argument, description: str) -> bool:
    """使用共享的异步引擎连接执行alembic命令"""
    try:
        logger.info(f"{description}...")
        cfg = Config(str(ALEMBIC_INI))

        async with get_engine().begin() as conn:
            await conn.run_sync(action, cfg, argument)

        logger.info(f"{description}完成")
        return True

    except Exception as e:
        logger.error(f"{description}失败: {e}")
        return False

    finally:
        await close_db_connections()


async def main():
    configure_logging()

    if len(sys.argv) > 1:
        if sys.argv[1] == "revision":
            message = sys.argv[2] if len(sys.argv) > 2 else "Auto-generated migration"
            flag = await run_command(run_revision, message, f"生成迁移文件: {message}")
        elif sys.argv[1] == "downgrade":
            target = sys.argv[2] if len(sys.argv) > 2 else "-1"
            flag = await run_command(run_downgrade, target, f"回滚数据库迁移到版本 {target}")
        else:
            logger.error("未知命令，支持: revision <message>, downgrade [revision]")
            flag = False
    else:
        # 默认运行迁移
        flag = await run_command(run_upgrade, "head", "数据库迁移")

    sys.exit(0 if flag else 1)


if __name__ == "__main__":
    asyncio.run(main())
