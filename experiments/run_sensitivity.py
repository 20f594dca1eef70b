"""参数敏感性实验：sigmoid 策略的 gamma, delta"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
import numpy as np
import pandas as pd
from copy import deepcopy

from config import N_RUNS, SCENARIOS
from data import UniformSource, generate_nodes, generate_requests
from evaluation import summarize_run
from simulation import SchedulerConfig


def _sweep(param_name, values, scenario='moderate', n_runs=N_RUNS, seed=42):
    cfg_s = SCENARIOS[scenario]
    results = []
    for value in values:
        cost_list = []
        latency_list = []
        unassigned_list = []
        for run_idx in range(n_runs):
            run_seed = seed + run_idx * 1000
            np.random.seed(run_seed)
            nodes = generate_nodes(cfg_s['n_nodes'], capacity_range=cfg_s['capacity'])
            requests = generate_requests(cfg_s['n_requests'], load_range=cfg_s['load'])

            cfg = SchedulerConfig(policy='sigmoid', n_slots=cfg_s['n_slots'])
            setattr(cfg, param_name, value)
            driver = cfg.build_driver(deepcopy(nodes), requests, source=UniformSource(run_seed))
            summary = summarize_run(driver.run())

            cost_list.append(summary['cost_mean'])
            latency_list.append(summary['cumulative_latency'])
            unassigned_list.append(summary['unassigned_total'])

        results.append({
            param_name: value,
            'cost_mean': np.mean(cost_list),
            'cost_std': np.std(cost_list),
            'cumulative_latency_mean': np.mean(latency_list),
            'unassigned_mean': np.mean(unassigned_list),
        })
        print(f"{param_name}={value}: Cost={np.mean(cost_list):.4f}, "
              f"Latency={np.mean(latency_list):.3f}")

    return pd.DataFrame(results)


def run_sensitivity_gamma(seed=42, n_runs=N_RUNS):
    """gamma 敏感性"""
    return _sweep('gamma', [0.5, 1.0, 2.0, 5.0, 10.0], n_runs=n_runs, seed=seed)


def run_sensitivity_delta(seed=42, n_runs=N_RUNS):
    """delta 敏感性"""
    return _sweep('delta', [0.1, 0.2, 0.3, 0.4, 0.5], n_runs=n_runs, seed=seed)


if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)

    print("===== Sensitivity: gamma =====")
    df_gamma = run_sensitivity_gamma(seed=42)
    df_gamma.to_csv('results_sensitivity_gamma.csv', index=False)

    print("\n===== Sensitivity: delta =====")
    df_delta = run_sensitivity_delta(seed=42)
    df_delta.to_csv('results_sensitivity_delta.csv', index=False)
