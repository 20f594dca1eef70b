"""调度异常"""


class SchedulerError(Exception):
    """调度器异常基类"""


class FullCapacity(SchedulerError):
    """节点剩余容量不足以承载本次预留

    单个请求级别的失败，由分配引擎在本地恢复（请求记为未分配）。
    """

    def __init__(self, node_id, amount: float, remaining: float):
        self.node_id = node_id
        self.amount = amount
        self.remaining = remaining
        super().__init__(
            f"node {node_id!r} cannot reserve {amount:.4f} (remaining {remaining:.4f})"
        )


class InvalidWeightVector(SchedulerError):
    """权重向量为负、非有限或无法归一化，属于常量配置错误"""


class EmptyNodeSet(SchedulerError):
    """未配置任何节点"""
