from .driver import SlotDriver, SlotPhase
from .settings import SchedulerConfig
