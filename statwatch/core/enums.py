from enum import Enum


class ConversionKind(str, Enum):
    """
    Strategy used to turn a (capacity, usage) pair into figures for one resource.

    DIRECT_USAGE takes the capacity value itself as the usage percentage
    (the CPU load figure is already percentage-like). The other kinds compute
    usage as an integer percentage of capacity, and the FREE_* kinds also
    derive the remaining headroom in a human-scaled unit.
    """
    DIRECT_USAGE = "direct_usage"
    PERCENTAGE_USAGE = "percentage_usage"
    FREE_DISK_SPACE = "free_disk_space"
    FREE_NETWORK_BANDWIDTH = "free_network_bandwidth"


class ReportUnit(str, Enum):
    """Unit of the figure reported in an alert line"""
    NONE = "none"
    PERCENTAGE = "percentage"
    MEGABYTES = "megabytes"
    MEGABITS = "megabits"

    @property
    def reports_percentage(self) -> bool:
        """Whether alerts in this unit report usage percent rather than free quantity"""
        return self in (ReportUnit.NONE, ReportUnit.PERCENTAGE)


class ServiceStatus(str, Enum):
    """Service statuses"""
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"
    EXHAUSTED = "exhausted"
    ERROR = "error"
