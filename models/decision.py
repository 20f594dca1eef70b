"""单时隙决策与报告"""
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

from .weights import WeightVector


@dataclass
class Decision:
    """一个时隙内的调度决策

    Attributes:
        assignments: 请求 -> 计算节点，按提交顺序
        unassigned: 没有可行节点的请求，按扫描顺序
        transfers: 请求 -> 传输节点
        unrouted: 没有可行传输节点的请求，按扫描顺序
        retention: 节点 -> 是否保留容器
        prefetched: 已预取的 (节点, 服务) 对
        pressure: 节点 -> 扩缩容判定时的压力值
        scaling: 节点 -> 副本数变化（+1 / -1），未变化的节点不记录
        placement: 新副本的放置节点，没有低于上限的节点时为 None
    """
    assignments: Dict[Hashable, Hashable] = field(default_factory=dict)
    unassigned: List[Hashable] = field(default_factory=list)
    transfers: Dict[Hashable, Hashable] = field(default_factory=dict)
    unrouted: List[Hashable] = field(default_factory=list)
    retention: Dict[Hashable, bool] = field(default_factory=dict)
    prefetched: List[Tuple[Hashable, Hashable]] = field(default_factory=list)
    pressure: Dict[Hashable, float] = field(default_factory=dict)
    scaling: Dict[Hashable, int] = field(default_factory=dict)
    placement: Optional[Hashable] = None


@dataclass(frozen=True)
class SlotReport:
    """单时隙汇总"""
    slot: int
    load: float
    weights: WeightVector
    total_cost: float
    total_latency: float
    scheduling_latency_us: float
    assigned_count: int
    unassigned_count: int
    transferred_count: int = 0
    unrouted_count: int = 0
    retained_count: int = 0
    prefetch_cost: float = 0.0
    scaled_up_count: int = 0
    scaled_down_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """展平为一行，便于构建 DataFrame"""
        return {
            'slot': self.slot,
            'load': self.load,
            'w_computation': self.weights.computation,
            'w_retention': self.weights.retention,
            'w_transfer': self.weights.transfer,
            'w_preparation': self.weights.preparation,
            'total_cost': self.total_cost,
            'total_latency': self.total_latency,
            'scheduling_latency_us': self.scheduling_latency_us,
            'assigned': self.assigned_count,
            'unassigned': self.unassigned_count,
            'transferred': self.transferred_count,
            'unrouted': self.unrouted_count,
            'retained': self.retained_count,
            'prefetch_cost': self.prefetch_cost,
            'scaled_up': self.scaled_up_count,
            'scaled_down': self.scaled_down_count,
        }


@dataclass
class RunResult:
    """整次运行的结果"""
    reports: List[SlotReport] = field(default_factory=list)
    cancelled: bool = False

    @property
    def cumulative_latency(self) -> float:
        """所有时隙 total_latency 之和"""
        return sum(r.total_latency for r in self.reports)

    @property
    def cumulative_scheduling_latency_us(self) -> float:
        """所有时隙分配耗时之和（微秒）"""
        return sum(r.scheduling_latency_us for r in self.reports)
