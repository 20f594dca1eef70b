"""时隙驱动

一个时隙严格按 扰动 -> 计算权重 -> 调度 -> 报告 顺序执行，
上一时隙的预留全部提交到账本后才开始下一时隙。取消只在时隙之间生效。
"""
import logging
import threading
import time
from enum import Enum
from typing import Optional, Sequence, Tuple

from adapters.base import AdapterState, BaseWeightAdapter
from config import (N_SLOTS, RETENTION_THRESHOLD, RETENTION_LOAD_CEILING,
                    PREFETCH_COST_MULTIPLIER, REQUEST_PERTURB_RANGE, NODE_PERTURB_RANGE)
from data.generator import perturb_nodes, perturb_requests
from data.stochastic import StochasticSource
from evaluation.cost_model import cost, latency_contribution
from models.decision import Decision, RunResult, SlotReport
from models.errors import SchedulerError
from models.node import Node
from models.request import Request
from models.service import PrefetchedService
from models.weights import WeightVector
from solvers.base import BaseAssigner
from solvers.greedy import GreedyCostAssigner
from solvers.ledger import CapacityLedger
from solvers.prefetch import prefetch_cost, prefetch_services
from solvers.pressure import PressureScaler
from solvers.retention import decide_retention

logger = logging.getLogger(__name__)


class SlotPhase(Enum):
    IDLE = "idle"
    PERTURBING = "perturbing"
    WEIGHT_COMPUTING = "weight_computing"
    SCHEDULING = "scheduling"
    REPORTING = "reporting"
    DONE = "done"


_TRANSITIONS = {
    SlotPhase.IDLE: {SlotPhase.PERTURBING, SlotPhase.DONE},
    SlotPhase.PERTURBING: {SlotPhase.WEIGHT_COMPUTING},
    SlotPhase.WEIGHT_COMPUTING: {SlotPhase.SCHEDULING},
    SlotPhase.SCHEDULING: {SlotPhase.REPORTING},
    SlotPhase.REPORTING: {SlotPhase.PERTURBING, SlotPhase.DONE},
    SlotPhase.DONE: set(),
}


class SlotDriver:
    """逐时隙运行权重适配与容量约束分配

    Args:
        nodes: 节点列表（整个运行期间存活，扰动原地修改）
        requests: 请求列表，顺序即调度顺序
        adapter: 权重适配器
        source: 随机输入源，None 表示不扰动
        assigner: 计算放置算法，缺省 GreedyCostAssigner
        n_slots: 时隙数
        carry_capacity: True 时已用容量跨时隙累积，False 时每时隙开始清零
        services: 每时隙预取的服务
        transfer_router: 传输路由算法，None 表示不做传输决策
        pressure_scaler: 压力扩缩容，None 表示不做副本调整
    """

    def __init__(self, nodes: Sequence[Node], requests: Sequence[Request],
                 adapter: BaseWeightAdapter, source: Optional[StochasticSource] = None,
                 assigner: Optional[BaseAssigner] = None, n_slots: int = N_SLOTS,
                 carry_capacity: bool = True,
                 services: Sequence[PrefetchedService] = (),
                 transfer_router: Optional[BaseAssigner] = None,
                 pressure_scaler: Optional[PressureScaler] = None,
                 retention_threshold: float = RETENTION_THRESHOLD,
                 retention_load_ceiling: float = RETENTION_LOAD_CEILING,
                 prefetch_multiplier: float = PREFETCH_COST_MULTIPLIER,
                 request_perturb_range: Tuple[float, float] = REQUEST_PERTURB_RANGE,
                 node_perturb_range: Tuple[float, float] = NODE_PERTURB_RANGE):
        if n_slots < 0:
            raise ValueError(f"n_slots must be non-negative, got {n_slots}")
        self.ledger = CapacityLedger(nodes)
        self.transfer_ledger = (CapacityLedger(nodes, dimension='transfer')
                                if transfer_router is not None else None)

        self.requests = list(requests)
        ids = [r.request_id for r in self.requests]
        if len(set(ids)) != len(ids):
            raise ValueError("request ids must be unique")

        self.adapter = adapter
        self.source = source
        self.assigner = assigner if assigner is not None else GreedyCostAssigner()
        self.transfer_router = transfer_router
        self.pressure_scaler = pressure_scaler
        self.n_slots = n_slots
        self.carry_capacity = carry_capacity
        self.services = list(services)
        self.retention_threshold = retention_threshold
        self.retention_load_ceiling = retention_load_ceiling
        self.prefetch_multiplier = prefetch_multiplier
        self.request_perturb_range = request_perturb_range
        self.node_perturb_range = node_perturb_range

        self.adapter_state = AdapterState()
        self.phase = SlotPhase.IDLE
        self.slot = 0
        self.last_decision: Optional[Decision] = None
        self._committed_load = self.ledger.aggregate_load()
        self._cancel = threading.Event()

    @property
    def done(self) -> bool:
        return self.phase is SlotPhase.DONE

    def cancel(self):
        """请求在当前时隙结束后停止"""
        self._cancel.set()

    def _enter(self, phase: SlotPhase):
        if phase not in _TRANSITIONS[self.phase]:
            raise SchedulerError(f"illegal transition {self.phase.value} -> {phase.value}")
        logger.debug("slot %d: %s -> %s", self.slot, self.phase.value, phase.value)
        self.phase = phase

    def step(self) -> SlotReport:
        """运行一个完整时隙"""
        if self.done:
            raise SchedulerError("run already finished")

        self._enter(SlotPhase.PERTURBING)
        if self.source is not None:
            self.requests = perturb_requests(self.requests, self.source, self.request_perturb_range)
            perturb_nodes(self.ledger.nodes, self.source, self.node_perturb_range)

        self._enter(SlotPhase.WEIGHT_COMPUTING)
        if self.carry_capacity:
            load = self.ledger.aggregate_load()
        else:
            # 清零模式下以上一时隙提交后的负载作为观测负载
            load = self._committed_load
            self.ledger.reset()
            if self.transfer_ledger is not None:
                self.transfer_ledger.reset()
        weights, self.adapter_state = self.adapter.step(load, self.adapter_state)

        self._enter(SlotPhase.SCHEDULING)
        decision = Decision()
        if self.services:
            prefetch_services(self.ledger, self.services, decision)
        start = time.perf_counter()
        self.assigner.assign(self.requests, self.ledger, weights, decision)
        scheduling_us = (time.perf_counter() - start) * 1e6
        if self.transfer_router is not None:
            self.transfer_router.assign(self.requests, self.transfer_ledger, weights, decision)
        if self.pressure_scaler is not None:
            self.pressure_scaler.run(self.ledger, decision)
        decide_retention(self.ledger, load, decision,
                         threshold=self.retention_threshold,
                         load_ceiling=self.retention_load_ceiling)

        self._enter(SlotPhase.REPORTING)
        report = self._report(load, weights, decision, scheduling_us)
        self.last_decision = decision
        self._committed_load = self.ledger.aggregate_load()
        self.slot += 1
        logger.info("Time Slot %d: load=%.4f total_cost=%.6f total_latency=%.6f "
                    "scheduling=%.1fus unassigned=%d",
                    report.slot, load, report.total_cost, report.total_latency,
                    report.scheduling_latency_us, report.unassigned_count)

        if self.slot >= self.n_slots:
            self._enter(SlotPhase.DONE)
        return report

    def _report(self, load: float, weights: WeightVector, decision: Decision,
                scheduling_us: float) -> SlotReport:
        by_id = {r.request_id: r for r in self.requests}
        total_cost = 0.0
        total_latency = 0.0
        for request_id, node_id in decision.assignments.items():
            request = by_id[request_id]
            node = self.ledger.node(node_id)
            total_cost += cost(request, node, weights)
            total_latency += latency_contribution(request, node)

        extra = prefetch_cost(decision, self.services, self.prefetch_multiplier)
        return SlotReport(
            slot=self.slot,
            load=load,
            weights=weights,
            total_cost=total_cost + extra,
            total_latency=total_latency,
            scheduling_latency_us=scheduling_us,
            assigned_count=len(decision.assignments),
            unassigned_count=len(decision.unassigned),
            transferred_count=len(decision.transfers),
            unrouted_count=len(decision.unrouted),
            retained_count=sum(decision.retention.values()),
            prefetch_cost=extra,
            scaled_up_count=sum(1 for d in decision.scaling.values() if d > 0),
            scaled_down_count=sum(1 for d in decision.scaling.values() if d < 0),
        )

    def run(self) -> RunResult:
        """运行剩余全部时隙"""
        result = RunResult()
        while self.slot < self.n_slots and not self.done:
            if self._cancel.is_set():
                logger.info("run cancelled before slot %d", self.slot)
                result.cancelled = True
                break
            result.reports.append(self.step())
        if not self.done:
            self._enter(SlotPhase.DONE)

        logger.info("Overall latency across %d slots: %.6f (scheduling %.1fus)",
                    len(result.reports), result.cumulative_latency,
                    result.cumulative_scheduling_latency_us)
        return result
