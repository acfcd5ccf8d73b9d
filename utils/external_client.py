"""
外部HTTP请求工具模块

提供简单的HTTP客户端功能，用于与外部服务通信。
"""

import asyncio
from typing import Dict, Any, Optional

import aiohttp

from .logger_utils import get_component_logger

logger = get_component_logger(__name__, "ExternalClient")


class ExternalClient:
    """外部客户端，config 中的请求头附加到每次请求"""

    def __init__(self, config: Optional[Dict] = None):
        self.config = config or {}

    async def make_request(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        max_retries: int = 0
    ) -> Dict[str, Any] | str:
        """
        发送HTTP请求

        参数:
            method: HTTP方法 (GET, POST, PUT, DELETE)
            url: 完整请求URL
            data: 请求体数据
            params: 查询参数
            headers: 请求头
            timeout: 超时时间（秒）
            max_retries: 最大重试次数

        返回:
            响应数据字典（JSON）或文本

        异常:
            ValueError: URL 不是 http(s) 地址
            aiohttp.ClientError / asyncio.TimeoutError: 重试耗尽后抛出最后一次错误
        """
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"需要提供完整的请求URL: {url}")

        default_headers = {"User-Agent": "Catalog-Recommender/1.0.0", **(headers or {}), **self.config}

        last_error: Optional[Exception] = None
        for attempt in range(max_retries + 1):
            try:
                async with aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=timeout),
                    headers=default_headers
                ) as session:
                    async with session.request(
                        method,
                        url,
                        params=params,
                        json=data,
                    ) as response:
                        response.raise_for_status()
                        if response.content_type == 'application/json':
                            response_data = await response.json()
                        else:
                            response_data = await response.text()

                        logger.debug(f"请求成功: {method} {url}")
                        return response_data

            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = e
                if attempt < max_retries:
                    delay = 0.5 * (2 ** attempt)  # 指数退避
                    logger.warning(f"请求失败，{delay}秒后重试: {e}")
                    await asyncio.sleep(delay)

        raise last_error
