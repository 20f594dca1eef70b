import math

import pytest

from models import InvalidWeightVector, Node, Request, WeightVector


def test_node_defaults_transfer_capacity_to_max():
    node = Node(node_id='a', max_capacity=12.0, computation_cost=0.1, retention_cost=0.1)
    assert node.transfer_capacity == 12.0
    assert node.remaining == 12.0


@pytest.mark.parametrize('kwargs', [
    {'max_capacity': 0.0},
    {'max_capacity': 10.0, 'used_capacity': 11.0},
    {'max_capacity': 10.0, 'used_capacity': -1.0},
    {'max_capacity': 10.0, 'computation_cost': -0.1},
    {'max_capacity': 10.0, 'replicas': 0},
    {'max_capacity': 10.0, 'replicas': 4, 'max_replicas': 3},
    {'max_capacity': 10.0, 'network_latency': -1.0},
])
def test_node_rejects_invalid_values(kwargs):
    params = {'node_id': 0, 'computation_cost': 0.1, 'retention_cost': 0.1}
    params.update(kwargs)
    with pytest.raises(ValueError):
        Node(**params)


def test_request_rejects_negative_load():
    with pytest.raises(ValueError):
        Request(request_id=0, computation_load=-1.0)


def test_request_scaled_returns_new_instance():
    request = Request(request_id=0, computation_load=10.0, transfer_cost=0.5,
                      preparation_cost=0.2, distance=3.0)
    scaled = request.scaled(0.5)
    assert scaled is not request
    assert scaled.computation_load == 5.0
    assert scaled.transfer_cost == 0.25
    assert scaled.preparation_cost == 0.2
    assert scaled.distance == 3.0
    assert request.computation_load == 10.0


def test_weight_vector_rejects_unnormalized():
    with pytest.raises(InvalidWeightVector):
        WeightVector(0.5, 0.5, 0.5, 0.5)


def test_weight_vector_rejects_negative():
    with pytest.raises(InvalidWeightVector):
        WeightVector(1.2, -0.2, 0.0, 0.0)


def test_normalized_clamps_and_sums_to_one():
    w = WeightVector.normalized([2.0, -1.0, 1.0, 1.0])
    assert w.retention == 0.0
    assert math.fsum(w.as_tuple()) == pytest.approx(1.0, abs=1e-9)
    assert w.computation == pytest.approx(0.5)


@pytest.mark.parametrize('raw', [
    [0.0, 0.0, 0.0, 0.0],
    [-1.0, -2.0, 0.0, 0.0],
    [float('nan'), 1.0, 1.0, 1.0],
    [1.0, 1.0, 1.0],
])
def test_normalized_rejects_degenerate_input(raw):
    with pytest.raises(InvalidWeightVector):
        WeightVector.normalized(raw)
