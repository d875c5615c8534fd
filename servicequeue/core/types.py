"""
Core types for the service queue.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Buzzer = int

# Returned by serve()/peek() when nobody is waiting.
NO_BUZZER: Buzzer = -1


class BuzzerState(Enum):
    """Lifecycle state of a buzzer ID."""

    UNALLOCATED = "unallocated"
    WAITING = "waiting"
    RETIRED = "retired"


@dataclass(frozen=True)
class QueueStats:
    """
    Point-in-time summary of a service queue.

    Attributes:
        length: Number of waiting entries.
        reusable: Number of retired buzzers available for reuse.
        issued: Number of distinct buzzers ever handed out.
        front: Buzzer at the front of the queue, or NO_BUZZER.
    """

    length: int
    reusable: int
    issued: int
    front: Buzzer = NO_BUZZER
