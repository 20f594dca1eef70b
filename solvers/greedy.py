"""Greedy Cost 分配

按请求给定顺序逐个分配，不按优先级或截止时间重排。每个请求扫描全部节点，
在可行节点中选加权成本最小者，成本相同时取先遇到的节点；选中后立即预留，
后续请求看到更新后的剩余容量。结果依赖请求顺序，这是算法约定的一部分。
"""
import logging
from typing import Optional, Sequence

from evaluation.cost_model import cost
from models.decision import Decision
from models.errors import FullCapacity
from models.request import Request
from models.weights import WeightVector
from .base import BaseAssigner
from .ledger import CapacityLedger

logger = logging.getLogger(__name__)


class GreedyCostAssigner(BaseAssigner):
    """加权成本贪心分配（不做交换或回溯）"""

    def assign(self, requests: Sequence[Request], ledger: CapacityLedger,
               weights: WeightVector, decision: Optional[Decision] = None) -> Decision:
        if decision is None:
            decision = Decision()

        for request in requests:
            best_id = None
            best_cost = float('inf')
            for node in ledger:
                if not ledger.can_fit(node.node_id, request.computation_load):
                    continue
                c = cost(request, node, weights)
                if c < best_cost:
                    best_cost = c
                    best_id = node.node_id

            if best_id is None:
                logger.debug("request %r unassigned: no node fits load %.4f",
                             request.request_id, request.computation_load)
                decision.unassigned.append(request.request_id)
                continue

            try:
                ledger.reserve(best_id, request.computation_load)
            except FullCapacity as exc:
                logger.warning("request %r lost its reservation: %s", request.request_id, exc)
                decision.unassigned.append(request.request_id)
                continue
            decision.assignments[request.request_id] = best_id

        return decision

    @property
    def name(self) -> str:
        return 'greedy-cost'
