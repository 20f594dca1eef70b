"""压力驱动的副本扩缩容与放置

节点压力是三项的乘积：
    请求压力 = replicas / max_replicas
    性能压力 = 1 / (1 + exp(-steepness * (rtt - target_rtt)))
    资源压力 = 计算维度利用率 used / max
压力高于 scale_up_threshold 且副本未满时加一个副本，低于 scale_down_threshold
且副本多于 1 时减一个副本。新副本放到压力最低、且压力低于上限的未满节点。
"""
import logging
import math
from typing import Hashable, Optional

from config import SCALE_UP_THRESHOLD, SCALE_DOWN_THRESHOLD, TARGET_RTT, RTT_STEEPNESS
from models.decision import Decision
from models.node import Node
from .ledger import CapacityLedger

logger = logging.getLogger(__name__)


def request_pressure(replicas: int, max_replicas: int) -> float:
    return replicas / max_replicas


def performance_pressure(rtt: float, target_rtt: float = TARGET_RTT,
                         steepness: float = RTT_STEEPNESS) -> float:
    """logistic 时延压力，rtt == target_rtt 时为 0.5"""
    return 1.0 / (1.0 + math.exp(-steepness * (rtt - target_rtt)))


class PressureScaler:
    """按节点压力调整副本数并给出新副本的放置节点

    Args:
        scale_up_threshold: 扩容阈值，也是放置时的压力上限
        scale_down_threshold: 缩容阈值
        target_rtt: 性能压力的目标时延
        steepness: 性能压力曲线斜率
    """

    def __init__(self, scale_up_threshold: float = SCALE_UP_THRESHOLD,
                 scale_down_threshold: float = SCALE_DOWN_THRESHOLD,
                 target_rtt: float = TARGET_RTT, steepness: float = RTT_STEEPNESS):
        if not 0 <= scale_down_threshold < scale_up_threshold:
            raise ValueError("need 0 <= scale_down_threshold < scale_up_threshold, got "
                             f"{scale_down_threshold}, {scale_up_threshold}")
        self.scale_up_threshold = scale_up_threshold
        self.scale_down_threshold = scale_down_threshold
        self.target_rtt = target_rtt
        self.steepness = steepness

    def pressure(self, node: Node, ledger: CapacityLedger) -> float:
        """节点当前压力，资源项取 ledger 所在维度的利用率"""
        return (request_pressure(node.replicas, node.max_replicas) *
                performance_pressure(node.network_latency, self.target_rtt, self.steepness) *
                ledger.utilization(node.node_id))

    def scale(self, ledger: CapacityLedger, decision: Optional[Decision] = None) -> Decision:
        """每个节点最多加减一个副本，原地修改 node.replicas"""
        if decision is None:
            decision = Decision()
        for node in ledger:
            p = self.pressure(node, ledger)
            decision.pressure[node.node_id] = p
            if p > self.scale_up_threshold and node.replicas < node.max_replicas:
                node.replicas += 1
                decision.scaling[node.node_id] = 1
                logger.debug("node %r scaled up to %d replicas (pressure %.4f)",
                             node.node_id, node.replicas, p)
            elif p < self.scale_down_threshold and node.replicas > 1:
                node.replicas -= 1
                decision.scaling[node.node_id] = -1
                logger.debug("node %r scaled down to %d replicas (pressure %.4f)",
                             node.node_id, node.replicas, p)
        return decision

    def place(self, ledger: CapacityLedger, decision: Optional[Decision] = None) -> Decision:
        """选压力最低的未满节点，压力必须严格低于扩容阈值；平局取先遇到的节点"""
        if decision is None:
            decision = Decision()
        best_id: Optional[Hashable] = None
        lowest = self.scale_up_threshold
        for node in ledger:
            if node.replicas >= node.max_replicas:
                continue
            p = self.pressure(node, ledger)
            if p < lowest:
                lowest = p
                best_id = node.node_id
        decision.placement = best_id
        return decision

    def run(self, ledger: CapacityLedger, decision: Optional[Decision] = None) -> Decision:
        """先扩缩容，再按扩缩容后的压力做放置"""
        decision = self.scale(ledger, decision)
        return self.place(ledger, decision)
