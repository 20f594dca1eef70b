from .errors import SchedulerError, FullCapacity, InvalidWeightVector, EmptyNodeSet
from .node import Node
from .request import Request
from .service import PrefetchedService
from .weights import WeightVector
from .decision import Decision, SlotReport, RunResult
