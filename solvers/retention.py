"""容器保留决策"""
from typing import Optional

from config import RETENTION_THRESHOLD, RETENTION_LOAD_CEILING
from models.decision import Decision
from .ledger import CapacityLedger


def decide_retention(ledger: CapacityLedger, load: float,
                     decision: Optional[Decision] = None,
                     threshold: float = RETENTION_THRESHOLD,
                     load_ceiling: float = RETENTION_LOAD_CEILING) -> Decision:
    """每个节点每时隙决定一次是否保留热容器

    负载不超过 load_ceiling 且节点保留成本不超过 threshold 时保留。
    """
    if decision is None:
        decision = Decision()
    for node in ledger:
        decision.retention[node.node_id] = load <= load_ceiling and node.retention_cost <= threshold
    return decision
