"""容量账本

节点集合的唯一可变状态。分配引擎只能通过 reserve() 修改已用容量，
同一节点上的预留由节点锁串行化。
"""
import logging
import threading
from typing import Dict, Hashable, Iterator, List, Sequence

from models.errors import EmptyNodeSet, FullCapacity
from models.node import Node

logger = logging.getLogger(__name__)

# 维度 -> (已用字段, 最大容量字段)
DIMENSIONS = {
    'compute': ('used_capacity', 'max_capacity'),
    'transfer': ('transfer_used', 'transfer_capacity'),
}


class CapacityLedger:
    """按节点标识索引的容量账本

    Args:
        nodes: 节点列表，顺序即分配时的扫描顺序
        dimension: 'compute' 或 'transfer'
    """

    def __init__(self, nodes: Sequence[Node], dimension: str = 'compute'):
        if not nodes:
            raise EmptyNodeSet("at least one node is required")
        if dimension not in DIMENSIONS:
            raise ValueError(f"Unknown capacity dimension: {dimension}")
        self.dimension = dimension
        self._used_attr, self._max_attr = DIMENSIONS[dimension]
        self.nodes: List[Node] = list(nodes)
        self._index: Dict[Hashable, int] = {}
        for j, node in enumerate(self.nodes):
            if node.node_id in self._index:
                raise ValueError(f"duplicate node id: {node.node_id!r}")
            self._index[node.node_id] = j
        self._locks = {node.node_id: threading.Lock() for node in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def node(self, node_id: Hashable) -> Node:
        """按标识取节点，未知标识抛出 KeyError"""
        return self.nodes[self._index[node_id]]

    def used(self, node_id: Hashable) -> float:
        return getattr(self.node(node_id), self._used_attr)

    def remaining(self, node_id: Hashable) -> float:
        """剩余容量"""
        node = self.node(node_id)
        return getattr(node, self._max_attr) - getattr(node, self._used_attr)

    def utilization(self, node_id: Hashable) -> float:
        """已用 / 最大"""
        node = self.node(node_id)
        return getattr(node, self._used_attr) / getattr(node, self._max_attr)

    def can_fit(self, node_id: Hashable, amount: float) -> bool:
        """used + amount <= max"""
        node = self.node(node_id)
        return getattr(node, self._used_attr) + amount <= getattr(node, self._max_attr)

    def reserve(self, node_id: Hashable, amount: float) -> float:
        """预留容量，返回预留后的已用容量

        Raises:
            FullCapacity: used + amount > max
        """
        if amount < 0:
            raise ValueError(f"cannot reserve a negative amount: {amount}")
        node = self.node(node_id)
        with self._locks[node_id]:
            used = getattr(node, self._used_attr)
            limit = getattr(node, self._max_attr)
            if used + amount > limit:
                raise FullCapacity(node_id, amount, limit - used)
            used += amount
            setattr(node, self._used_attr, used)
        return used

    def aggregate_load(self) -> float:
        """聚合负载 = sum(used) / sum(max)"""
        total_used = sum(getattr(n, self._used_attr) for n in self.nodes)
        total_max = sum(getattr(n, self._max_attr) for n in self.nodes)
        return total_used / total_max

    def reset(self):
        """清空本维度的已用容量"""
        for node in self.nodes:
            with self._locks[node.node_id]:
                setattr(node, self._used_attr, 0.0)
        logger.debug("%s ledger reset (%d nodes)", self.dimension, len(self.nodes))

    def snapshot(self) -> Dict[Hashable, float]:
        """节点标识 -> 已用容量"""
        return {n.node_id: getattr(n, self._used_attr) for n in self.nodes}
