"""传输路由分配

与计算放置相互独立的第二轮贪心，作用在传输容量维度上：
cost = distance + multiplier * (transfer_used / transfer_capacity)。
可行性、扫描顺序和平局规则与 GreedyCostAssigner 相同，
找不到可行节点的请求记入 decision.unrouted。
"""
import logging
from typing import Optional, Sequence

from config import TRANSFER_COST_MULTIPLIER
from evaluation.cost_model import transfer_route_cost
from models.decision import Decision
from models.errors import FullCapacity
from models.request import Request
from models.weights import WeightVector
from .base import BaseAssigner
from .ledger import CapacityLedger

logger = logging.getLogger(__name__)


class GreedyTransferRouter(BaseAssigner):
    """按距离和传输负载惩罚选择传输节点"""

    def __init__(self, transfer_multiplier: float = TRANSFER_COST_MULTIPLIER):
        self.transfer_multiplier = transfer_multiplier

    def assign(self, requests: Sequence[Request], ledger: CapacityLedger,
               weights: WeightVector, decision: Optional[Decision] = None) -> Decision:
        """weights 不参与传输成本，仅为保持接口一致"""
        if ledger.dimension != 'transfer':
            raise ValueError(f"transfer routing needs a transfer ledger, got {ledger.dimension!r}")
        if decision is None:
            decision = Decision()

        for request in requests:
            best_id = None
            best_cost = float('inf')
            for node in ledger:
                if not ledger.can_fit(node.node_id, request.demand):
                    continue
                c = transfer_route_cost(request, ledger.utilization(node.node_id),
                                        self.transfer_multiplier)
                if c < best_cost:
                    best_cost = c
                    best_id = node.node_id

            if best_id is None:
                logger.debug("request %r not routed: no node fits demand %.4f",
                             request.request_id, request.demand)
                decision.unrouted.append(request.request_id)
                continue

            try:
                ledger.reserve(best_id, request.demand)
            except FullCapacity as exc:
                logger.warning("request %r lost its transfer reservation: %s",
                               request.request_id, exc)
                decision.unrouted.append(request.request_id)
                continue
            decision.transfers[request.request_id] = best_id

        return decision

    @property
    def name(self) -> str:
        return 'greedy-transfer'
