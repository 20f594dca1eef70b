import pytest

from evaluation.cost_model import cost, latency_contribution, transfer_route_cost
from models import Node, Request, WeightVector


def test_cost_matches_weighted_sum():
    node = Node(node_id=0, max_capacity=100.0, computation_cost=0.03, retention_cost=0.02)
    request = Request(request_id=0, computation_load=25.0, transfer_cost=0.025, preparation_cost=0.02)
    w = WeightVector(0.4, 0.3, 0.2, 0.1)
    expected = 0.4 * 0.03 * 25.0 + 0.3 * 0.02 + 0.2 * 0.025 + 0.1 * 0.02
    assert cost(request, node, w) == pytest.approx(expected)


def test_cost_is_pure(two_nodes, single_request, uniform_weights):
    first = cost(single_request, two_nodes[0], uniform_weights)
    second = cost(single_request, two_nodes[0], uniform_weights)
    assert first == second
    assert two_nodes[0].used_capacity == 0.0


def test_zero_load_drops_only_computation_term():
    node = Node(node_id=0, max_capacity=10.0, computation_cost=5.0, retention_cost=0.1)
    request = Request(request_id=0, computation_load=0.0, transfer_cost=0.2, preparation_cost=0.3)
    w = WeightVector(0.25, 0.25, 0.25, 0.25)
    assert cost(request, node, w) == pytest.approx(0.25 * (0.1 + 0.2 + 0.3))


def test_cost_monotone_in_computation_cost(single_request, uniform_weights):
    previous = None
    for c in (0.01, 0.02, 0.05, 0.5, 3.0):
        node = Node(node_id=0, max_capacity=10.0, computation_cost=c, retention_cost=0.01)
        value = cost(single_request, node, uniform_weights)
        if previous is not None:
            assert value >= previous
        previous = value


def test_latency_contribution():
    node = Node(node_id=0, max_capacity=10.0, computation_cost=0.02, retention_cost=0.5)
    request = Request(request_id=0, computation_load=5.0, transfer_cost=0.02)
    assert latency_contribution(request, node) == pytest.approx(5.0 * 0.02 + 0.02)


def test_transfer_route_cost():
    request = Request(request_id=0, computation_load=1.0, distance=110.0)
    assert transfer_route_cost(request, 0.5, 0.1) == pytest.approx(110.05)
