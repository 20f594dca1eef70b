"""服务请求模型"""
from dataclasses import dataclass, fields, replace
from typing import Hashable


@dataclass(frozen=True)
class Request:
    """服务请求

    Attributes:
        request_id: 请求标识（时隙内唯一）
        computation_load: 计算负载，即占用的节点容量
        transfer_cost: 传输成本
        preparation_cost: 准备成本
        distance: 到节点的距离（传输路由使用）
        demand: 传输维度的容量需求
        deadline: 截止时间，仅作记录，调度时不检查
    """
    request_id: Hashable
    computation_load: float
    transfer_cost: float = 0.0
    preparation_cost: float = 0.0
    distance: float = 0.0
    demand: float = 0.0
    deadline: float = 0.0

    def __post_init__(self):
        for f in fields(self):
            if f.name in ('request_id', 'deadline'):
                continue
            if getattr(self, f.name) < 0:
                raise ValueError(f"request {self.request_id!r}: {f.name} must be non-negative")

    def scaled(self, factor: float) -> 'Request':
        """按乘性因子缩放计算负载与传输成本，返回新请求"""
        return replace(self,
                       computation_load=self.computation_load * factor,
                       transfer_cost=self.transfer_cost * factor)
