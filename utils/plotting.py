"""绘图工具"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def plot_policy_comparison(df: pd.DataFrame, metric: str = 'cost_mean', save_path: str = None):
    """绘制各场景下不同权重策略的对比柱状图

    Args:
        df: 包含 scenario, policy 与 metric 列的 DataFrame
        metric: 指标列名
        save_path: 保存路径（可选）
    """
    scenarios = df['scenario'].unique()
    policies = df['policy'].unique()

    fig, ax = plt.subplots(figsize=(10, 6))

    x = np.arange(len(scenarios))
    width = 0.8 / max(len(policies), 1)
    offsets = (np.arange(len(policies)) - (len(policies) - 1) / 2) * width

    for i, policy in enumerate(policies):
        grouped = df[df['policy'] == policy].groupby('scenario')[metric]
        means = grouped.mean()
        stds = grouped.std().fillna(0)
        values = [means.get(s, 0) for s in scenarios]
        errors = [stds.get(s, 0) for s in scenarios]
        ax.bar(x + offsets[i], values, width, yerr=errors, capsize=3, label=policy)

    ax.set_xlabel('Scenario')
    ax.set_ylabel(metric)
    ax.set_title(f'{metric} by Weight Policy')
    ax.set_xticks(x)
    ax.set_xticklabels(scenarios)
    ax.legend()

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=150)
    plt.close(fig)
    return fig


def plot_slot_series(df: pd.DataFrame, metric: str = 'total_cost', save_path: str = None):
    """绘制逐时隙曲线，每个 (scenario, policy) 一条

    Args:
        df: reports_to_frame 的输出，附加 scenario, policy 列
        metric: 指标列名
        save_path: 保存路径（可选）
    """
    fig, ax = plt.subplots(figsize=(12, 6))

    group_cols = [c for c in ('scenario', 'policy') if c in df.columns]
    if group_cols:
        for key, group in df.groupby(group_cols):
            label = ' / '.join(key) if isinstance(key, tuple) else str(key)
            ax.plot(group['slot'], group[metric], 'o-', label=label, alpha=0.8)
        ax.legend()
    else:
        ax.plot(df['slot'], df[metric], 'o-')

    ax.set_xlabel('Time Slot')
    ax.set_ylabel(metric)
    ax.set_title(f'{metric} Over Time')

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=150)
    plt.close(fig)
    return fig
