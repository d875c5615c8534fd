"""
Take-a-number service queue with reusable buzzer IDs.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .core.types import NO_BUZZER, Buzzer, BuzzerState, QueueStats
from .exceptions import InvariantViolationError, ServiceQueueError, ValidationError
from .queue.locked_queue import LockedServiceQueue
from .queue.service_queue import ServiceQueue

__version__ = "0.1.0"

__all__ = [
    "Buzzer",
    "BuzzerState",
    "InvariantViolationError",
    "LockedServiceQueue",
    "NO_BUZZER",
    "QueueStats",
    "ServiceQueue",
    "ServiceQueueError",
    "ValidationError",
]
