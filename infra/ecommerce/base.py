"""
商品目录源基类

定义所有电商目录源的统一接口。
"""

from abc import ABC, abstractmethod
from typing import Optional

from models import CatalogPage, SalesChannel


class CatalogSource(ABC):
    """商品目录源抽象基类"""

    @abstractmethod
    async def fetch_page(
        self,
        cursor: Optional[str] = None,
        channel_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> CatalogPage:
        """
        拉取一页商品 (抽象方法)

        参数:
            cursor: 分页游标，None表示第一页
            channel_id: 销售渠道过滤
            status: 商品状态过滤

        返回:
            CatalogPage: 商品列表及分页信息
        """
        pass

    @abstractmethod
    async def list_channels(self) -> list[SalesChannel]:
        """获取销售渠道列表 (抽象方法)"""
        pass
