import pytest

from models import Node
from solvers import CapacityLedger, PressureScaler, performance_pressure, request_pressure


def _node(node_id, used, replicas, max_replicas=10, latency=70.0):
    return Node(node_id=node_id, max_capacity=10.0, used_capacity=used,
                computation_cost=0.1, retention_cost=0.1,
                network_latency=latency, replicas=replicas, max_replicas=max_replicas)


def test_pressure_terms():
    assert request_pressure(3, 10) == pytest.approx(0.3)
    assert performance_pressure(70.0) == pytest.approx(0.5)
    assert performance_pressure(150.0) > 0.999
    assert performance_pressure(20.0) < 0.001


def test_pressure_is_product_of_terms():
    node = _node('mid', used=5.0, replicas=5)
    ledger = CapacityLedger([node])
    assert PressureScaler().pressure(node, ledger) == pytest.approx(0.5 * 0.5 * 0.5)


def test_scale_up_and_down():
    nodes = [
        _node('hot', used=9.0, replicas=9, latency=150.0),
        _node('idle', used=0.0, replicas=3, latency=50.0),
        _node('single', used=0.0, replicas=1),
        _node('mid', used=5.0, replicas=5),
    ]
    decision = PressureScaler().scale(CapacityLedger(nodes))
    assert decision.scaling == {'hot': 1, 'idle': -1}
    assert [n.replicas for n in nodes] == [10, 2, 1, 5]
    assert decision.pressure['mid'] == pytest.approx(0.125)
    assert decision.pressure['hot'] > 0.5


def test_full_node_does_not_scale_up():
    node = _node('full', used=10.0, replicas=10, latency=150.0)
    decision = PressureScaler().scale(CapacityLedger([node]))
    assert decision.scaling == {}
    assert node.replicas == 10


def test_placement_after_scaling_prefers_lowest_pressure():
    nodes = [
        _node('hot', used=9.0, replicas=9, latency=150.0),
        _node('idle', used=0.0, replicas=3, latency=50.0),
        _node('single', used=0.0, replicas=1),
        _node('mid', used=5.0, replicas=5),
    ]
    decision = PressureScaler().run(CapacityLedger(nodes))
    # hot 已满被跳过，idle 与 single 压力同为 0，取先遇到的
    assert decision.placement == 'idle'


def test_no_placement_at_or_above_ceiling():
    nodes = [
        _node('maxed', used=1.0, replicas=10),
        _node('busy', used=9.0, replicas=8, latency=150.0),
    ]
    decision = PressureScaler().place(CapacityLedger(nodes))
    assert decision.placement is None


def test_thresholds_validated():
    with pytest.raises(ValueError):
        PressureScaler(scale_up_threshold=0.1, scale_down_threshold=0.5)
    with pytest.raises(ValueError):
        PressureScaler(scale_down_threshold=-0.1)
