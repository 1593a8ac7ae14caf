"""Errors raised when the engine rejects a request. All are deterministic for the same inputs."""
from datetime import date


class ComplianceError(ValueError):
    """Base class for every rejection raised by the engine."""


class InvalidDateRangeError(ComplianceError):
    """A range whose end precedes its start (query range or stay dates)."""

    def __init__(self, start: date, end: date, what: str = "range"):
        self.start = start
        self.end = end
        super().__init__(f"Invalid {what}: end ({end.isoformat()}) is before start ({start.isoformat()})")


class InvalidReferenceDateError(ComplianceError):
    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid reference date: {reason}")


class InvalidStayError(ComplianceError):
    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid stay {field}: {reason}")


class InvalidConfigError(ComplianceError):
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f'Invalid configuration "{key}": {reason}')
