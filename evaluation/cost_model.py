"""成本模型

纯函数，无副作用：相同输入总是得到相同输出。
"""
from models.node import Node
from models.request import Request
from models.weights import WeightVector


def cost(request: Request, node: Node, weights: WeightVector) -> float:
    """请求放置到节点上的加权成本

    cost = w_c * c_node * load + w_r * r_node + w_tr * tr_req + w_p * p_req
    """
    return (weights.computation * node.computation_cost * request.computation_load +
            weights.retention * node.retention_cost +
            weights.transfer * request.transfer_cost +
            weights.preparation * request.preparation_cost)


def latency_contribution(request: Request, node: Node) -> float:
    """请求在节点上的时延贡献 = load * c_node + tr_req"""
    return request.computation_load * node.computation_cost + request.transfer_cost


def transfer_route_cost(request: Request, utilization: float, multiplier: float) -> float:
    """传输路由成本 = 距离 + 乘子 * 节点传输利用率"""
    return request.distance + multiplier * utilization
