from typing import Optional


class StatwatchError(Exception):
    """Base exception for all application errors"""
    pass

class ConfigurationError(StatwatchError):
    """Base exception for configuration errors"""
    pass

class PollError(StatwatchError):
    """Base exception for failed fetch attempts, counted toward the error budget"""
    pass

class TransportError(PollError):
    """Request could not be sent or timed out"""
    pass

class StatusError(PollError):
    """Server answered with a non-OK status"""

    def __init__(self, status: int, reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        super().__init__(f"Unexpected status code: {status}" + (f" {reason}" if reason else ""))

class BodyReadError(PollError):
    """Response body could not be read after a successful status"""
    pass

class ParseError(StatwatchError):
    """Base exception for payloads that cannot be turned into a snapshot"""
    pass

class FormatError(ParseError):
    """Payload does not have the expected number of fields"""

    def __init__(self, field_count: int, expected: int):
        self.field_count = field_count
        self.expected = expected
        super().__init__(f"Invalid metrics format: expected {expected} fields, got {field_count}")

class NumberError(ParseError):
    """A payload field is not a valid non-negative integer"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid metric value: {field!r}")
