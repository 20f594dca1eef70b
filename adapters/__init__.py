from .base import AdapterState, BaseWeightAdapter
from .sigmoid import SigmoidWeightAdapter
from .piecewise import PiecewiseSlopeAdapter, load_slope

ADAPTERS = {
    'sigmoid': SigmoidWeightAdapter,
    'piecewise-slope': PiecewiseSlopeAdapter,
}


def make_adapter(policy: str, **params) -> BaseWeightAdapter:
    """按策略名构造权重适配器"""
    try:
        cls = ADAPTERS[policy]
    except KeyError:
        raise ValueError(f"Unknown weight policy: {policy}") from None
    return cls(**params)
