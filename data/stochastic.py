"""随机输入源

调度核心只通过 next(low, high) 拉取有界随机值，不持有具体生成器，
测试可以换成常数或固定序列。
"""
from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable, Optional

import numpy as np


class StochasticSource(ABC):
    """拉取式随机源"""

    @abstractmethod
    def next(self, low: float, high: float) -> float:
        """返回 [low, high] 内的一个值"""
        pass


class UniformSource(StochasticSource):
    """numpy 均匀分布随机源，可指定种子复现"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def next(self, low: float, high: float) -> float:
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return float(self.rng.uniform(low, high))


class ConstantSource(StochasticSource):
    """总是返回同一个值，忽略区间"""

    def __init__(self, value: float = 1.0):
        self.value = value

    def next(self, low: float, high: float) -> float:
        return self.value


class SequenceSource(StochasticSource):
    """循环返回给定序列，忽略区间"""

    def __init__(self, values: Iterable[float]):
        values = list(values)
        if not values:
            raise ValueError("SequenceSource needs at least one value")
        self._values = cycle(values)

    def next(self, low: float, high: float) -> float:
        return next(self._values)
