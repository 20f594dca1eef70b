"""预取服务模型"""
from dataclasses import dataclass
from typing import Hashable


@dataclass(frozen=True)
class PrefetchedService:
    """可预取到节点上的服务镜像

    Attributes:
        service_id: 服务标识
        size: 占用的计算容量
        prefetch_cost: 预取成本
    """
    service_id: Hashable
    size: float
    prefetch_cost: float
