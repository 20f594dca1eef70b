import math

import pytest

from adapters import (AdapterState, PiecewiseSlopeAdapter, SigmoidWeightAdapter,
                      load_slope, make_adapter)
from models import InvalidWeightVector, WeightVector

LOADS = [0.0, 0.05, 0.3, 0.4, 0.41, 0.55, 0.7, 0.71, 0.9, 1.0]


def _sigmoid(x):
    return 1.0 / (1.0 + math.exp(-x))


def _assert_normalized(w):
    assert all(v >= 0 for v in w.as_tuple())
    assert abs(math.fsum(w.as_tuple()) - 1.0) <= 1e-9


def test_sigmoid_matches_formula():
    adapter = SigmoidWeightAdapter(gamma=1.0, delta=0.3)
    w = adapter.adapt(0.5, 0.0, WeightVector.uniform())
    raw = [_sigmoid(1.0 * (0.5 - 0.3 - off)) for off in (0.0, 0.1, 0.2, 0.3)]
    total = sum(raw)
    for got, expected in zip(w.as_tuple(), raw):
        assert got == pytest.approx(expected / total)


def test_sigmoid_orders_weights_by_offset():
    w = SigmoidWeightAdapter(gamma=5.0).adapt(0.6, 0.0, WeightVector.uniform())
    assert w.computation > w.retention > w.transfer > w.preparation


def test_sigmoid_ignores_previous_state():
    adapter = SigmoidWeightAdapter()
    a = adapter.adapt(0.6, 0.1, WeightVector.uniform())
    b = adapter.adapt(0.6, 0.9, WeightVector(1.0, 0.0, 0.0, 0.0))
    assert a == b


def test_sigmoid_requires_four_offsets():
    with pytest.raises(ValueError):
        SigmoidWeightAdapter(offsets=(0.0, 0.1))


def test_load_slope_zero_previous():
    assert load_slope(0.5, 0.0) == 0.0
    assert load_slope(0.5, 0.25) == pytest.approx(1.0)


def test_piecewise_boundary_uses_low_band():
    adapter = PiecewiseSlopeAdapter()
    # previous 0.2 -> slope 1.0, which would change the medium band vector
    w = adapter.adapt(0.4, 0.2, WeightVector.uniform())
    assert w.as_tuple() == pytest.approx((0.5, 0.2, 0.2, 0.1))


def test_piecewise_medium_band_without_history():
    w = PiecewiseSlopeAdapter().adapt(0.5, 0.0, WeightVector.uniform())
    assert w.as_tuple() == pytest.approx((0.4, 0.3, 0.2, 0.1))


def test_piecewise_medium_band_slope_nudge():
    w = PiecewiseSlopeAdapter().adapt(0.5, 0.25, WeightVector.uniform())
    raw = (0.5, 0.35, 0.15, 0.05)
    assert w.as_tuple() == pytest.approx(tuple(v / 1.05 for v in raw))


def test_piecewise_upper_boundary_stays_in_medium_band():
    w = PiecewiseSlopeAdapter().adapt(0.7, 0.0, WeightVector.uniform())
    assert w.as_tuple() == pytest.approx((0.4, 0.3, 0.2, 0.1))


def test_piecewise_high_band_clamps_negative_weights():
    w = PiecewiseSlopeAdapter().adapt(0.9, 0.1, WeightVector.uniform())
    # slope = 8 -> raw (1.1, 1.2, -0.2, -0.3)
    assert w.transfer == 0.0
    assert w.preparation == 0.0
    assert w.computation == pytest.approx(1.1 / 2.3)
    assert w.retention == pytest.approx(1.2 / 2.3)


def test_piecewise_all_clamped_is_invalid():
    adapter = PiecewiseSlopeAdapter(medium_base=(0.1, 0.1, 0.1, 0.1),
                                    medium_coeffs=(-1.0, -1.0, -1.0, -1.0))
    with pytest.raises(InvalidWeightVector):
        adapter.adapt(0.5, 0.25, WeightVector.uniform())


def test_piecewise_rejects_bad_bounds():
    with pytest.raises(ValueError):
        PiecewiseSlopeAdapter(low_bound=0.8, high_bound=0.5)


@pytest.mark.parametrize('policy', ['sigmoid', 'piecewise-slope'])
def test_weights_always_normalized(policy):
    adapter = make_adapter(policy)
    state = AdapterState()
    for load in LOADS + LOADS[::-1]:
        weights, state = adapter.step(load, state)
        _assert_normalized(weights)
        assert state.previous_load == load
        assert state.previous_weights == weights


def test_adapter_state_is_explicit():
    adapter = make_adapter('piecewise-slope')
    state_a = AdapterState()
    state_b = AdapterState()
    _, state_a = adapter.step(0.3, state_a)
    w_a, state_a = adapter.step(0.6, state_a)
    w_b, state_b = adapter.step(0.6, state_b)
    # same load, different history
    assert w_a != w_b
    assert state_b.previous_load == 0.6


def test_initial_state():
    state = AdapterState()
    assert state.previous_load == 0.0
    assert state.previous_weights.as_tuple() == pytest.approx((0.5, 0.2, 0.2, 0.1))


def test_make_adapter():
    assert isinstance(make_adapter('sigmoid', gamma=2.0), SigmoidWeightAdapter)
    assert make_adapter('piecewise-slope').name == 'piecewise-slope'
    with pytest.raises(ValueError):
        make_adapter('linear')
