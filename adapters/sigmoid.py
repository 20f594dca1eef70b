"""Sigmoid 饱和权重策略"""
import numpy as np
from typing import Sequence

from config import GAMMA, DELTA_C, SIGMOID_OFFSETS
from models.weights import WeightVector
from .base import BaseWeightAdapter


class SigmoidWeightAdapter(BaseWeightAdapter):
    """Sigmoid 饱和策略

    w_i = 1 / (1 + exp(-gamma * (load - delta - offset_i)))，再归一化。
    偏移递增，负载越高，后面几项的权重上升越多。不使用上一时隙的状态。
    """

    def __init__(self, gamma: float = GAMMA, delta: float = DELTA_C,
                 offsets: Sequence[float] = SIGMOID_OFFSETS):
        if len(offsets) != 4:
            raise ValueError(f"expected 4 offsets, got {len(offsets)}")
        self.gamma = gamma
        self.delta = delta
        self.offsets = np.asarray(offsets, dtype=float)

    def adapt(self, current_load: float, previous_load: float,
              previous_weights: WeightVector) -> WeightVector:
        raw = 1.0 / (1.0 + np.exp(-self.gamma * (current_load - self.delta - self.offsets)))
        return WeightVector.normalized(raw.tolist())

    @property
    def name(self) -> str:
        return 'sigmoid'
