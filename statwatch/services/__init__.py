from .evaluator import AlertEvaluator
from .parser import parse_snapshot
from .poller import Poller
from .monitor import MonitorService

__all__ = [
    'AlertEvaluator',
    'parse_snapshot',
    'Poller',
    'MonitorService'
]
