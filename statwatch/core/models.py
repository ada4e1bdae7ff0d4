from typing import ClassVar
from pydantic import BaseModel, ConfigDict, Field

from .enums import ConversionKind, ReportUnit


class MetricsSnapshot(BaseModel):
    """
    One parsed set of the seven raw values reported by the stats endpoint.

    Memory and disk figures are in bytes, network figures in bytes per second.
    A snapshot is built once per successful poll and discarded after a single
    evaluation pass.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    # Payload order
    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        'cpu_load',
        'memory_capacity',
        'memory_usage',
        'disk_capacity',
        'disk_usage',
        'network_capacity',
        'network_activity',
    )

    cpu_load: int = Field(..., ge=0, description="Load figure, already percentage-like")
    memory_capacity: int = Field(..., ge=0, description="Total memory in bytes")
    memory_usage: int = Field(..., ge=0, description="Used memory in bytes")
    disk_capacity: int = Field(..., ge=0, description="Total disk space in bytes")
    disk_usage: int = Field(..., ge=0, description="Used disk space in bytes")
    network_capacity: int = Field(..., ge=0, description="Network bandwidth in bytes/s")
    network_activity: int = Field(..., ge=0, description="Network activity in bytes/s")

    @classmethod
    def from_values(cls, values: list[int]) -> 'MetricsSnapshot':
        """Build a snapshot from values given in payload order"""
        return cls(**dict(zip(cls.FIELD_ORDER, values)))

    def field_values(self) -> list[int]:
        """Field values in payload order"""
        return [getattr(self, name) for name in self.FIELD_ORDER]

    def to_payload(self) -> str:
        """Render the snapshot back into the wire format"""
        return ",".join(str(value) for value in self.field_values())


class ResourceCheck(BaseModel):
    """Description of one monitored resource for the current poll cycle"""

    model_config = ConfigDict(frozen=True)

    name: str
    capacity: int = Field(..., ge=0)
    usage: int = Field(..., ge=0)
    threshold: int = Field(..., ge=0, le=100, description="Alert threshold in percent")
    message: str = Field(..., description="Alert template with a single {value} placeholder")
    unit: ReportUnit
    conversion: ConversionKind


class Alert(BaseModel):
    """A triggered resource check"""

    model_config = ConfigDict(frozen=True)

    resource: str
    value: int
    message: str

    def __str__(self) -> str:
        return self.message
