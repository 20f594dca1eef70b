"""调度器运行配置

所有可调常量都可以从 dict 或 JSON 文件覆盖，缺省值来自 config.py。
"""
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

import config
from adapters import make_adapter
from adapters.base import BaseWeightAdapter
from data.stochastic import StochasticSource
from models.node import Node
from models.request import Request
from models.service import PrefetchedService
from solvers.pressure import PressureScaler
from solvers.transfer import GreedyTransferRouter
from .driver import SlotDriver

logger = logging.getLogger(__name__)


@dataclass
class SchedulerConfig:
    n_slots: int = config.N_SLOTS
    policy: str = 'sigmoid'
    # sigmoid
    gamma: float = config.GAMMA
    delta: float = config.DELTA_C
    offsets: Tuple[float, ...] = config.SIGMOID_OFFSETS
    # piecewise-slope
    low_bound: float = config.LOW_LOAD_BOUND
    high_bound: float = config.HIGH_LOAD_BOUND
    low_base: Tuple[float, ...] = config.LOW_BASE_WEIGHTS
    medium_base: Tuple[float, ...] = config.MEDIUM_BASE_WEIGHTS
    medium_coeffs: Tuple[float, ...] = config.MEDIUM_SLOPE_COEFFS
    high_base: Tuple[float, ...] = config.HIGH_BASE_WEIGHTS
    high_coeffs: Tuple[float, ...] = config.HIGH_SLOPE_COEFFS
    # 保留 / 传输 / 预取
    retention_threshold: float = config.RETENTION_THRESHOLD
    retention_load_ceiling: float = config.RETENTION_LOAD_CEILING
    enable_transfer: bool = False
    transfer_multiplier: float = config.TRANSFER_COST_MULTIPLIER
    prefetch_multiplier: float = config.PREFETCH_COST_MULTIPLIER
    # 压力扩缩容
    enable_pressure_scaling: bool = False
    scale_up_threshold: float = config.SCALE_UP_THRESHOLD
    scale_down_threshold: float = config.SCALE_DOWN_THRESHOLD
    target_rtt: float = config.TARGET_RTT
    rtt_steepness: float = config.RTT_STEEPNESS
    # 扰动与容量策略
    request_perturb_range: Tuple[float, float] = config.REQUEST_PERTURB_RANGE
    node_perturb_range: Tuple[float, float] = config.NODE_PERTURB_RANGE
    carry_capacity: bool = True

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'SchedulerConfig':
        """从 dict 构造，未知键抛出 ValueError；列表转为元组"""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        kwargs = {k: tuple(v) if isinstance(v, list) else v for k, v in values.items()}
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path) -> 'SchedulerConfig':
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, 'r') as f:
            values = json.load(f)
        logger.info("Loaded scheduler config from %s", path)
        return cls.from_dict(values)

    def adapter_params(self) -> Dict[str, Any]:
        if self.policy == 'sigmoid':
            return {'gamma': self.gamma, 'delta': self.delta, 'offsets': self.offsets}
        if self.policy == 'piecewise-slope':
            return {
                'low_bound': self.low_bound,
                'high_bound': self.high_bound,
                'low_base': self.low_base,
                'medium_base': self.medium_base,
                'medium_coeffs': self.medium_coeffs,
                'high_base': self.high_base,
                'high_coeffs': self.high_coeffs,
            }
        raise ValueError(f"Unknown weight policy: {self.policy}")

    def build_adapter(self) -> BaseWeightAdapter:
        return make_adapter(self.policy, **self.adapter_params())

    def build_driver(self, nodes: Sequence[Node], requests: Sequence[Request],
                     source: Optional[StochasticSource] = None,
                     services: Sequence[PrefetchedService] = ()) -> SlotDriver:
        router = (GreedyTransferRouter(self.transfer_multiplier)
                  if self.enable_transfer else None)
        scaler = (PressureScaler(self.scale_up_threshold, self.scale_down_threshold,
                                 self.target_rtt, self.rtt_steepness)
                  if self.enable_pressure_scaling else None)
        return SlotDriver(
            nodes, requests, self.build_adapter(),
            source=source,
            n_slots=self.n_slots,
            carry_capacity=self.carry_capacity,
            services=services,
            transfer_router=router,
            pressure_scaler=scaler,
            retention_threshold=self.retention_threshold,
            retention_load_ceiling=self.retention_load_ceiling,
            prefetch_multiplier=self.prefetch_multiplier,
            request_perturb_range=self.request_perturb_range,
            node_perturb_range=self.node_perturb_range,
        )
