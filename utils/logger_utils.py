"""
日志工厂模块

服务与脚本共用同一套日志格式；各模块通过 get_component_logger 获取日志器。
"""

import logging
from typing import Optional

from config import app_config

LOG_FORMAT = '%(levelname)s:\t  %(asctime)s - %(name)s - Line %(lineno)d - %(message)s'

# 这些第三方库的日志不传播到根logger，避免同步过程中刷屏
QUIET_LOGGERS = ('sqlalchemy', 'httpx', 'openai', 'aiohttp', 'langfuse')


def configure_logging(level: Optional[str] = None):
    """
    配置全局日志系统

    在 main.py 的 lifespan 或脚本入口调用一次

    参数:
        level: 日志级别，默认使用 LOG_LEVEL 配置
    """
    logging.basicConfig(level=(level or app_config.LOG_LEVEL).upper(), format=LOG_FORMAT)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).propagate = False


def get_component_logger(component_name: str, identifier: Optional[str] = None) -> logging.Logger:
    """
    获取组件日志器

    参数:
        component_name: 模块名（通常为 __name__）
        identifier: 组件名，仅用于调用处标明归属
    """
    return logging.getLogger(component_name)
