"""Assigner 基类"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from models.decision import Decision
from models.request import Request
from models.weights import WeightVector
from .ledger import CapacityLedger


class BaseAssigner(ABC):
    """分配算法基类"""

    @abstractmethod
    def assign(self, requests: Sequence[Request], ledger: CapacityLedger,
               weights: WeightVector, decision: Optional[Decision] = None) -> Decision:
        """求解请求分配并在账本上提交容量

        Args:
            requests: 请求列表，按给定顺序逐个调度
            ledger: 容量账本，节点顺序即扫描顺序
            weights: 本时隙权重
            decision: 追加结果的决策对象，缺省新建

        Returns:
            decision
        """
        pass

    @property
    def name(self) -> str:
        """算法名称"""
        return self.__class__.__name__
