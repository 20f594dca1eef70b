"""节点模型"""
from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass
class Node:
    """计算节点（边缘服务器 / 路侧单元 / 基站）

    Attributes:
        node_id: 节点标识，跨时隙稳定
        max_capacity: 最大计算容量
        computation_cost: 单位计算负载的计算成本（每时隙扰动）
        retention_cost: 保留容器的成本（每时隙扰动）
        used_capacity: 已用计算容量，只能通过 CapacityLedger 修改
        transfer_capacity: 传输维度容量，缺省与 max_capacity 相同
        transfer_used: 已用传输容量
        network_latency: 到请求方的往返时延（毫秒），用于性能压力
        replicas: 当前运行的函数副本数，由 PressureScaler 调整
        max_replicas: 副本数上限
    """
    node_id: Hashable
    max_capacity: float
    computation_cost: float
    retention_cost: float
    used_capacity: float = 0.0
    transfer_capacity: Optional[float] = None
    transfer_used: float = 0.0
    network_latency: float = 0.0
    replicas: int = 1
    max_replicas: int = 10

    def __post_init__(self):
        if self.max_capacity <= 0:
            raise ValueError(f"node {self.node_id!r}: max_capacity must be positive")
        if not 0 <= self.used_capacity <= self.max_capacity:
            raise ValueError(f"node {self.node_id!r}: used_capacity out of [0, max_capacity]")
        if self.computation_cost < 0 or self.retention_cost < 0:
            raise ValueError(f"node {self.node_id!r}: costs must be non-negative")
        if self.transfer_capacity is None:
            self.transfer_capacity = self.max_capacity
        if self.transfer_capacity <= 0:
            raise ValueError(f"node {self.node_id!r}: transfer_capacity must be positive")
        if self.network_latency < 0:
            raise ValueError(f"node {self.node_id!r}: network_latency must be non-negative")
        if not 1 <= self.replicas <= self.max_replicas:
            raise ValueError(f"node {self.node_id!r}: replicas out of [1, max_replicas]")

    @property
    def remaining(self) -> float:
        """剩余计算容量"""
        return self.max_capacity - self.used_capacity
