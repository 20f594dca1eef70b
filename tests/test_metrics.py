import pytest

from evaluation import reports_to_frame, summarize_run
from models import RunResult, SlotReport, WeightVector


def _report(slot, total_cost, unassigned=0, load=0.0):
    return SlotReport(slot=slot, load=load, weights=WeightVector.uniform(),
                      total_cost=total_cost, total_latency=2.0 * total_cost,
                      scheduling_latency_us=10.0, assigned_count=3,
                      unassigned_count=unassigned)


def test_summarize_run():
    result = RunResult(reports=[_report(0, 1.0), _report(1, 3.0, unassigned=2, load=0.6)])
    summary = summarize_run(result)
    assert summary['n_slots'] == 2
    assert summary['cost_mean'] == pytest.approx(2.0)
    assert summary['cost_total'] == pytest.approx(4.0)
    assert summary['cumulative_latency'] == pytest.approx(8.0)
    assert summary['sched_us_mean'] == pytest.approx(10.0)
    assert summary['unassigned_total'] == 2
    assert summary['load_final'] == pytest.approx(0.6)


def test_summarize_empty_run():
    summary = summarize_run(RunResult(cancelled=True))
    assert summary['n_slots'] == 0
    assert summary['cost_total'] == 0.0


def test_reports_to_frame():
    df = reports_to_frame([_report(0, 1.0), _report(1, 2.0)])
    assert list(df['slot']) == [0, 1]
    assert df['w_computation'].iloc[0] == pytest.approx(0.25)
    assert 'scheduling_latency_us' in df.columns


def test_summary_counts_unrouted_and_scaling():
    report = SlotReport(slot=0, load=0.2, weights=WeightVector.uniform(), total_cost=1.0,
                        total_latency=1.0, scheduling_latency_us=5.0, assigned_count=2,
                        unassigned_count=0, unrouted_count=2, scaled_up_count=1,
                        scaled_down_count=1)
    summary = summarize_run(RunResult(reports=[report, report]))
    assert summary['unrouted_total'] == 4
    assert summary['scaled_total'] == 4
    assert reports_to_frame([report])['unrouted'].iloc[0] == 2
