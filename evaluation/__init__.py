from .cost_model import cost, latency_contribution, transfer_route_cost
from .metrics import reports_to_frame, summarize_run
