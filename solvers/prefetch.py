"""服务预取"""
import logging
from typing import Optional, Sequence

from config import PREFETCH_COST_MULTIPLIER
from models.decision import Decision
from models.service import PrefetchedService
from .ledger import CapacityLedger

logger = logging.getLogger(__name__)


def prefetch_services(ledger: CapacityLedger, services: Sequence[PrefetchedService],
                      decision: Optional[Decision] = None) -> Decision:
    """按节点顺序、服务顺序预取，放得下就占用计算容量"""
    if decision is None:
        decision = Decision()
    for node in ledger:
        for service in services:
            if ledger.can_fit(node.node_id, service.size):
                ledger.reserve(node.node_id, service.size)
                decision.prefetched.append((node.node_id, service.service_id))
    if decision.prefetched:
        logger.debug("prefetched %d (node, service) pairs", len(decision.prefetched))
    return decision


def prefetch_cost(decision: Decision, services: Sequence[PrefetchedService],
                  multiplier: float = PREFETCH_COST_MULTIPLIER) -> float:
    """每个被预取过的服务计一次 multiplier * prefetch_cost"""
    fetched = {service_id for _, service_id in decision.prefetched}
    return sum(multiplier * s.prefetch_cost for s in services if s.service_id in fetched)
