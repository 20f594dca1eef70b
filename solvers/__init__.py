from .base import BaseAssigner
from .ledger import CapacityLedger
from .greedy import GreedyCostAssigner
from .transfer import GreedyTransferRouter
from .retention import decide_retention
from .prefetch import prefetch_services, prefetch_cost
from .pressure import PressureScaler, request_pressure, performance_pressure
