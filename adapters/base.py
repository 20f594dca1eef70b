"""权重适配器基类"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from config import INITIAL_WEIGHTS
from models.weights import WeightVector


def _initial_weights() -> WeightVector:
    return WeightVector.normalized(INITIAL_WEIGHTS)


@dataclass(frozen=True)
class AdapterState:
    """滚动适配状态，由调用方显式持有并逐时隙传递

    Attributes:
        previous_load: 上一时隙的聚合负载
        previous_weights: 上一时隙的权重
    """
    previous_load: float = 0.0
    previous_weights: WeightVector = field(default_factory=_initial_weights)


class BaseWeightAdapter(ABC):
    """根据聚合负载计算四项成本权重"""

    @abstractmethod
    def adapt(self, current_load: float, previous_load: float,
              previous_weights: WeightVector) -> WeightVector:
        """计算当前时隙的权重（纯函数）

        Args:
            current_load: 当前聚合负载，[0, 1]
            previous_load: 上一时隙的聚合负载
            previous_weights: 上一时隙的权重

        Returns:
            归一化后的 WeightVector

        Raises:
            InvalidWeightVector: 常量配置导致权重无法归一化
        """
        pass

    def step(self, load: float, state: AdapterState) -> Tuple[WeightVector, AdapterState]:
        """计算权重并推进状态"""
        weights = self.adapt(load, state.previous_load, state.previous_weights)
        return weights, AdapterState(previous_load=load, previous_weights=weights)

    @property
    def name(self) -> str:
        """策略名称"""
        return self.__class__.__name__
