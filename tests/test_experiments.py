import pandas as pd

from experiments.run_main import run_main_experiment
from simulation import SchedulerConfig
from utils.plotting import plot_policy_comparison, plot_slot_series


def test_main_experiment_covers_scenarios_and_policies():
    df, slots_df = run_main_experiment(SchedulerConfig(), n_runs=1, seed=1, verbose=False)
    assert set(df['scenario']) == {'light', 'moderate', 'heavy'}
    assert set(df['policy']) == {'sigmoid', 'piecewise-slope'}
    assert len(df) == 6
    assert (df['n_slots'] == 10).all()
    assert len(slots_df) == 60


def test_plots_are_written(tmp_path):
    df = pd.DataFrame({
        'scenario': ['light', 'light', 'heavy', 'heavy'],
        'policy': ['sigmoid', 'piecewise-slope'] * 2,
        'cost_mean': [1.0, 1.2, 2.0, 2.5],
    })
    out = tmp_path / 'cmp.png'
    plot_policy_comparison(df, 'cost_mean', save_path=str(out))
    assert out.exists()

    slots = pd.DataFrame({
        'slot': [0, 1, 0, 1],
        'total_cost': [1.0, 1.5, 0.8, 0.9],
        'scenario': ['light'] * 4,
        'policy': ['sigmoid', 'sigmoid', 'piecewise-slope', 'piecewise-slope'],
    })
    out = tmp_path / 'series.png'
    plot_slot_series(slots, 'total_cost', save_path=str(out))
    assert out.exists()
