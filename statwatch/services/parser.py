import re

from statwatch.core.exceptions import FormatError, NumberError
from statwatch.core.models import MetricsSnapshot

FIELD_DELIMITER = ","
FIELD_COUNT = len(MetricsSnapshot.FIELD_ORDER)

_DIGITS = re.compile(r"[0-9]+")


def parse_field(field: str) -> int:
    """
    Parse one payload field as a non-negative integer.

    Only plain ASCII digits are accepted: no sign, no surrounding whitespace,
    no digit separators.

    Raises:
        NumberError: If the field is not a valid non-negative integer
    """
    if not _DIGITS.fullmatch(field):
        raise NumberError(field)
    return int(field)


def parse_snapshot(payload: str) -> MetricsSnapshot:
    """
    Decode a raw stats payload into a snapshot.

    Args:
        payload: Seven comma-separated integers, e.g. "25,16000,8000,500000,100000,100000,50000"

    Returns:
        MetricsSnapshot: Fields mapped positionally

    Raises:
        FormatError: Wrong number of fields
        NumberError: A field is not a valid integer
    """
    fields = payload.split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise FormatError(len(fields), FIELD_COUNT)

    return MetricsSnapshot.from_values([parse_field(field) for field in fields])
