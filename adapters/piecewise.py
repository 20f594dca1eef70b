"""分段斜率自适应权重策略"""
import logging
from typing import Sequence

from config import (LOW_LOAD_BOUND, HIGH_LOAD_BOUND,
                    LOW_BASE_WEIGHTS, MEDIUM_BASE_WEIGHTS, MEDIUM_SLOPE_COEFFS,
                    HIGH_BASE_WEIGHTS, HIGH_SLOPE_COEFFS)
from models.weights import WeightVector
from .base import BaseWeightAdapter

logger = logging.getLogger(__name__)


def load_slope(current_load: float, previous_load: float) -> float:
    """相对负载变化率，previous_load 为 0 时定义为 0"""
    if previous_load == 0:
        return 0.0
    return (current_load - previous_load) / previous_load


class PiecewiseSlopeAdapter(BaseWeightAdapter):
    """分段斜率策略

    按负载区间选基准向量：
        load <= low_bound              -> low_base（不做斜率修正）
        low_bound < load <= high_bound -> medium_base + slope * medium_coeffs
        load > high_bound              -> high_base + slope * high_coeffs
    修正后负值截断为 0，再归一化。边界值归入较低区间。
    """

    def __init__(self, low_bound: float = LOW_LOAD_BOUND, high_bound: float = HIGH_LOAD_BOUND,
                 low_base: Sequence[float] = LOW_BASE_WEIGHTS,
                 medium_base: Sequence[float] = MEDIUM_BASE_WEIGHTS,
                 medium_coeffs: Sequence[float] = MEDIUM_SLOPE_COEFFS,
                 high_base: Sequence[float] = HIGH_BASE_WEIGHTS,
                 high_coeffs: Sequence[float] = HIGH_SLOPE_COEFFS):
        if low_bound > high_bound:
            raise ValueError(f"low_bound {low_bound} exceeds high_bound {high_bound}")
        for label, vec in (('low_base', low_base), ('medium_base', medium_base),
                           ('medium_coeffs', medium_coeffs), ('high_base', high_base),
                           ('high_coeffs', high_coeffs)):
            if len(vec) != 4:
                raise ValueError(f"{label} must have 4 elements, got {len(vec)}")
        self.low_bound = low_bound
        self.high_bound = high_bound
        self.low_base = tuple(low_base)
        self.medium_base = tuple(medium_base)
        self.medium_coeffs = tuple(medium_coeffs)
        self.high_base = tuple(high_base)
        self.high_coeffs = tuple(high_coeffs)

    def adapt(self, current_load: float, previous_load: float,
              previous_weights: WeightVector) -> WeightVector:
        if current_load <= self.low_bound:
            return WeightVector.normalized(self.low_base)

        if current_load <= self.high_bound:
            base, coeffs = self.medium_base, self.medium_coeffs
        else:
            base, coeffs = self.high_base, self.high_coeffs

        slope = load_slope(current_load, previous_load)
        raw = [b + slope * c for b, c in zip(base, coeffs)]
        if any(v < 0 for v in raw):
            logger.debug("slope %.4f drove weights negative, clamping: %s", slope, raw)
        return WeightVector.normalized(raw)

    @property
    def name(self) -> str:
        return 'piecewise-slope'
