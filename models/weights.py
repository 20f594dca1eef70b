"""权重向量模型"""
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from config import EPS_TOL
from .errors import InvalidWeightVector


@dataclass(frozen=True)
class WeightVector:
    """四项成本的相对权重，非负且和为 1

    Attributes:
        computation: 计算成本权重
        retention: 保留成本权重
        transfer: 传输成本权重
        preparation: 准备成本权重
    """
    computation: float
    retention: float
    transfer: float
    preparation: float

    def __post_init__(self):
        values = self.as_tuple()
        if not all(math.isfinite(v) for v in values):
            raise InvalidWeightVector(f"non-finite weights: {values}")
        if any(v < 0 for v in values):
            raise InvalidWeightVector(f"negative weights: {values}")
        if abs(math.fsum(values) - 1.0) > EPS_TOL:
            raise InvalidWeightVector(f"weights sum to {math.fsum(values)!r}, not 1")

    @classmethod
    def normalized(cls, raw: Sequence[float]) -> 'WeightVector':
        """负值截断为 0 后归一化

        Raises:
            InvalidWeightVector: 长度不是 4、含非有限值或截断后和为 0
        """
        if len(raw) != 4:
            raise InvalidWeightVector(f"expected 4 weights, got {len(raw)}")
        if not all(math.isfinite(v) for v in raw):
            raise InvalidWeightVector(f"non-finite raw weights: {tuple(raw)}")
        clamped = [max(0.0, float(v)) for v in raw]
        total = math.fsum(clamped)
        if total <= 0:
            raise InvalidWeightVector(f"raw weights {tuple(raw)} cannot be normalized")
        return cls(*(v / total for v in clamped))

    @classmethod
    def uniform(cls) -> 'WeightVector':
        return cls(0.25, 0.25, 0.25, 0.25)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.computation, self.retention, self.transfer, self.preparation)
