import matplotlib
matplotlib.use('Agg')

import pytest

from adapters.base import BaseWeightAdapter
from models import Node, Request, WeightVector


class FixedWeightAdapter(BaseWeightAdapter):
    """测试用：总是返回同一组权重"""

    def __init__(self, weights: WeightVector = None):
        self.weights = weights if weights is not None else WeightVector.uniform()

    def adapt(self, current_load, previous_load, previous_weights):
        return self.weights


@pytest.fixture
def uniform_weights():
    return WeightVector.uniform()


@pytest.fixture
def two_nodes():
    """容量 10/10，计算成本 0.03/0.02，保留成本相同"""
    return [
        Node(node_id=0, max_capacity=10.0, computation_cost=0.03, retention_cost=0.01),
        Node(node_id=1, max_capacity=10.0, computation_cost=0.02, retention_cost=0.01),
    ]


@pytest.fixture
def single_request():
    return Request(request_id='r0', computation_load=5.0, transfer_cost=0.02, preparation_cost=0.01)


@pytest.fixture
def fixed_adapter():
    return FixedWeightAdapter()


@pytest.fixture
def fixed_adapter_cls():
    return FixedWeightAdapter
