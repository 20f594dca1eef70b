"""统一指标计算"""
import numpy as np
import pandas as pd
from typing import Dict, List

from models.decision import RunResult, SlotReport


def reports_to_frame(reports: List[SlotReport]) -> pd.DataFrame:
    """把时隙报告转成 DataFrame，每个时隙一行"""
    return pd.DataFrame([r.to_dict() for r in reports])


def summarize_run(result: RunResult) -> Dict[str, float]:
    """汇总一次运行

    Args:
        result: SlotDriver.run() 的返回值

    Returns:
        dict with keys:
            - n_slots: int，实际完成的时隙数
            - cost_mean: float，平均每时隙总成本
            - cost_total: float，总成本
            - latency_mean: float，平均每时隙总时延
            - cumulative_latency: float，累计时延
            - sched_us_mean: float，平均分配耗时（微秒）
            - sched_us_p99: float，分配耗时 99 分位
            - unassigned_total: int，累计未分配请求数
            - unrouted_total: int，累计未路由请求数
            - scaled_total: int，累计副本调整次数（扩容 + 缩容）
            - load_final: float，最后一个时隙的负载
    """
    if not result.reports:
        return {
            'n_slots': 0,
            'cost_mean': 0.0,
            'cost_total': 0.0,
            'latency_mean': 0.0,
            'cumulative_latency': 0.0,
            'sched_us_mean': 0.0,
            'sched_us_p99': 0.0,
            'unassigned_total': 0,
            'unrouted_total': 0,
            'scaled_total': 0,
            'load_final': 0.0,
        }

    costs = np.array([r.total_cost for r in result.reports])
    latencies = np.array([r.total_latency for r in result.reports])
    sched_us = np.array([r.scheduling_latency_us for r in result.reports])

    return {
        'n_slots': len(result.reports),
        'cost_mean': float(np.mean(costs)),
        'cost_total': float(np.sum(costs)),
        'latency_mean': float(np.mean(latencies)),
        'cumulative_latency': float(result.cumulative_latency),
        'sched_us_mean': float(np.mean(sched_us)),
        'sched_us_p99': float(np.percentile(sched_us, 99)),
        'unassigned_total': int(sum(r.unassigned_count for r in result.reports)),
        'unrouted_total': int(sum(r.unrouted_count for r in result.reports)),
        'scaled_total': int(sum(r.scaled_up_count + r.scaled_down_count for r in result.reports)),
        'load_final': float(result.reports[-1].load),
    }
