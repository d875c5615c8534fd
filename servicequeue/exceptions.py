"""
Custom exceptions for the service queue.

Empty queues and unknown buzzers are not errors: ``serve`` returns
``NO_BUZZER`` and ``remove``/``expedite`` return ``False``. The exceptions
below cover programming errors only.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Any


class ServiceQueueError(Exception):
    """Base exception for all service queue errors."""

    pass


class ValidationError(ServiceQueueError):
    """Raised when an argument has the wrong type."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Validation error for field '{field}': {reason}")


class InvariantViolationError(ServiceQueueError):
    """Raised when the queue and reuse pool disagree about issued buzzers."""

    def __init__(self, rule: str, details: str) -> None:
        self.rule = rule
        self.details = details
        super().__init__(f"Service queue invariant '{rule}' violated: {details}")
