from typing import Callable, Optional

from statwatch.core.config import ThresholdConfig
from statwatch.core.enums import ConversionKind, ReportUnit
from statwatch.core.models import Alert, MetricsSnapshot, ResourceCheck
from statwatch.utils.logger import LoggerSetup

BYTES_PER_MEGABYTE = 1 << 20
BYTES_PER_MEGABIT = 1_000_000

CPU_MESSAGE = "Load Average is too high: {value}"
MEMORY_MESSAGE = "Memory usage too high: {value}%"
DISK_MESSAGE = "Free disk space is too low: {value} Mb left"
NETWORK_MESSAGE = "Network bandwidth usage high: {value} Mbit/s available"


def div_trunc(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero"""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def usage_percent(capacity: int, usage: int) -> int:
    return div_trunc(usage * 100, capacity)


def _direct_usage(capacity: int, usage: int) -> tuple[int, int]:
    return capacity, 0


def _percentage_usage(capacity: int, usage: int) -> tuple[int, int]:
    return usage_percent(capacity, usage), 0


def _free_disk_space(capacity: int, usage: int) -> tuple[int, int]:
    return usage_percent(capacity, usage), div_trunc(capacity - usage, BYTES_PER_MEGABYTE)


def _free_network_bandwidth(capacity: int, usage: int) -> tuple[int, int]:
    return usage_percent(capacity, usage), div_trunc(capacity - usage, BYTES_PER_MEGABIT)


_CONVERSIONS: dict[ConversionKind, Callable[[int, int], tuple[int, int]]] = {
    ConversionKind.DIRECT_USAGE: _direct_usage,
    ConversionKind.PERCENTAGE_USAGE: _percentage_usage,
    ConversionKind.FREE_DISK_SPACE: _free_disk_space,
    ConversionKind.FREE_NETWORK_BANDWIDTH: _free_network_bandwidth,
}


def convert(kind: ConversionKind, capacity: int, usage: int) -> tuple[int, int]:
    """
    Compute (usage_percent, free_quantity) for a resource.

    A zero capacity means the resource is absent: both figures are 0 and no
    alert can trigger.
    """
    if capacity == 0:
        return 0, 0
    return _CONVERSIONS[kind](capacity, usage)


def build_checks(snapshot: MetricsSnapshot, thresholds: ThresholdConfig) -> list[ResourceCheck]:
    """Describe the four monitored resources for one snapshot"""
    return [
        ResourceCheck(
            name='cpu',
            capacity=snapshot.cpu_load,
            usage=snapshot.cpu_load,
            threshold=thresholds.cpu,
            message=CPU_MESSAGE,
            unit=ReportUnit.NONE,
            conversion=ConversionKind.DIRECT_USAGE
        ),
        ResourceCheck(
            name='memory',
            capacity=snapshot.memory_capacity,
            usage=snapshot.memory_usage,
            threshold=thresholds.memory,
            message=MEMORY_MESSAGE,
            unit=ReportUnit.PERCENTAGE,
            conversion=ConversionKind.PERCENTAGE_USAGE
        ),
        ResourceCheck(
            name='disk',
            capacity=snapshot.disk_capacity,
            usage=snapshot.disk_usage,
            threshold=thresholds.disk,
            message=DISK_MESSAGE,
            unit=ReportUnit.MEGABYTES,
            conversion=ConversionKind.FREE_DISK_SPACE
        ),
        ResourceCheck(
            name='network',
            capacity=snapshot.network_capacity,
            usage=snapshot.network_activity,
            threshold=thresholds.network,
            message=NETWORK_MESSAGE,
            unit=ReportUnit.MEGABITS,
            conversion=ConversionKind.FREE_NETWORK_BANDWIDTH
        ),
    ]


def evaluate_check(check: ResourceCheck) -> Optional[Alert]:
    """Return an alert if the check's usage is strictly above its threshold"""
    percent, free = convert(check.conversion, check.capacity, check.usage)
    if percent <= check.threshold:
        return None

    value = percent if check.unit.reports_percentage else free
    return Alert(
        resource=check.name,
        value=value,
        message=check.message.format(value=value)
    )


class AlertEvaluator:
    """Evaluates every snapshot against static per-resource thresholds"""

    def __init__(self, thresholds: Optional[ThresholdConfig] = None):
        self._thresholds = thresholds or ThresholdConfig()
        self.logger = LoggerSetup.setup(__class__.__name__)

    def evaluate(self, snapshot: MetricsSnapshot) -> list[Alert]:
        """Run each resource check exactly once and collect the alerts"""
        alerts = []
        for check in build_checks(snapshot, self._thresholds):
            alert = evaluate_check(check)
            if alert is not None:
                self.logger.debug(f"{check.name} over threshold {check.threshold}: {alert.value}")
                alerts.append(alert)
        return alerts
