"""数据生成器与逐时隙扰动"""
import numpy as np
from typing import List, Sequence, Tuple

from models.node import Node
from models.request import Request
from models.service import PrefetchedService
from config import REQUEST_PERTURB_RANGE, NODE_PERTURB_RANGE
from .stochastic import StochasticSource


def sample_nodes() -> List[Node]:
    """三个节点的示例配置：两个边缘节点和一个远端节点"""
    return [
        Node(node_id=0, max_capacity=110.0, retention_cost=0.02, computation_cost=0.03,
             network_latency=50.0, replicas=3, max_replicas=10),
        Node(node_id=1, max_capacity=120.0, retention_cost=0.04, computation_cost=0.02,
             network_latency=60.0, replicas=2, max_replicas=10),
        Node(node_id=2, max_capacity=130.0, retention_cost=0.025, computation_cost=0.05,
             network_latency=150.0, replicas=5, max_replicas=20),
    ]


def sample_requests() -> List[Request]:
    """与 sample_nodes 配套的三个请求"""
    return [
        Request(request_id=0, deadline=4.0, computation_load=25.0, transfer_cost=0.025,
                preparation_cost=0.02, demand=10.0, distance=110.0),
        Request(request_id=1, deadline=5.0, computation_load=35.0, transfer_cost=0.035,
                preparation_cost=0.02, demand=15.0, distance=130.0),
        Request(request_id=2, deadline=2.0, computation_load=12.0, transfer_cost=0.015,
                preparation_cost=0.008, demand=5.0, distance=90.0),
    ]


def sample_services() -> List[PrefetchedService]:
    return [
        PrefetchedService(service_id=0, size=10.0, prefetch_cost=2.0),
        PrefetchedService(service_id=1, size=15.0, prefetch_cost=3.0),
        PrefetchedService(service_id=2, size=8.0, prefetch_cost=1.5),
    ]


def generate_nodes(n_nodes: int, capacity_range: Tuple[float, float] = (100, 140),
                   computation_cost_range: Tuple[float, float] = (0.02, 0.05),
                   retention_cost_range: Tuple[float, float] = (0.02, 0.6),
                   latency_range: Tuple[float, float] = (40, 160)) -> List[Node]:
    """均匀随机生成节点（使用全局 np.random 状态）"""
    capacities = np.random.uniform(*capacity_range, n_nodes)
    comp_costs = np.random.uniform(*computation_cost_range, n_nodes)
    ret_costs = np.random.uniform(*retention_cost_range, n_nodes)
    latencies = np.random.uniform(*latency_range, n_nodes)
    return [
        Node(node_id=j, max_capacity=float(capacities[j]),
             computation_cost=float(comp_costs[j]), retention_cost=float(ret_costs[j]),
             network_latency=float(latencies[j]))
        for j in range(n_nodes)
    ]


def generate_requests(n_requests: int, load_range: Tuple[float, float] = (10, 40),
                      transfer_cost_range: Tuple[float, float] = (0.01, 0.04),
                      preparation_cost_range: Tuple[float, float] = (0.005, 0.03),
                      distance_range: Tuple[float, float] = (80, 140)) -> List[Request]:
    """均匀随机生成请求，demand 取计算负载的 40%"""
    loads = np.random.uniform(*load_range, n_requests)
    transfer = np.random.uniform(*transfer_cost_range, n_requests)
    prep = np.random.uniform(*preparation_cost_range, n_requests)
    distance = np.random.uniform(*distance_range, n_requests)
    deadlines = np.random.uniform(1.0, 6.0, n_requests)
    return [
        Request(request_id=i, computation_load=float(loads[i]),
                transfer_cost=float(transfer[i]), preparation_cost=float(prep[i]),
                distance=float(distance[i]), demand=float(0.4 * loads[i]),
                deadline=float(deadlines[i]))
        for i in range(n_requests)
    ]


def perturb_requests(requests: Sequence[Request], source: StochasticSource,
                     perturb_range: Tuple[float, float] = REQUEST_PERTURB_RANGE) -> List[Request]:
    """每个请求抽一个因子，同时缩放计算负载和传输成本"""
    return [r.scaled(source.next(*perturb_range)) for r in requests]


def perturb_nodes(nodes: Sequence[Node], source: StochasticSource,
                  perturb_range: Tuple[float, float] = NODE_PERTURB_RANGE):
    """计算成本与保留成本各抽一个因子，原地修改"""
    for node in nodes:
        node.computation_cost *= source.next(*perturb_range)
        node.retention_cost *= source.next(*perturb_range)
