"""
Metrics and inspection helpers for ``ServiceQueue``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Deque, List

from servicequeue.core.types import NO_BUZZER, Buzzer, BuzzerState, QueueStats
from servicequeue.exceptions import InvariantViolationError, ValidationError


def validate_buzzer(value: Any, field: str = "buzzer") -> Buzzer:
    """
    Ensure a buzzer argument is an integer.

    Any integer is a valid buzzer to look up; negative values are simply
    never in the queue.

    Args:
        value: Candidate buzzer ID.
        field: Argument name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        ValidationError: If value is not an int (bools are rejected).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            field, value, f"expected int, got {type(value).__name__}"
        )
    return value


class ServiceQueueMetricsMixin:
    """
    Provides read-only inspection helpers for ServiceQueue.

    The mixin assumes inheriting classes define ``_queue`` (front at index 0)
    and ``_pool`` (top of stack at the end) attributes.
    """

    _queue: Deque[Buzzer]
    _pool: List[Buzzer]

    def pool_size(self) -> int:
        """
        Return number of retired buzzers waiting to be reused.

        Returns:
            Size of the reuse pool.
        """
        return len(self._pool)

    def reusable_buzzers(self) -> List[Buzzer]:
        """
        Return the reuse pool, next buzzer to be handed out first.

        Returns:
            Copy of the pool ordered from most to least recently retired.
        """
        return list(reversed(self._pool))

    def issued_count(self) -> int:
        """
        Return number of distinct buzzers handed out so far.

        Returns:
            Waiting plus reusable buzzer count.
        """
        return len(self._queue) + len(self._pool)

    def peek(self) -> Buzzer:
        """
        Return the buzzer at the front without serving it.

        Returns:
            Front buzzer ID, or NO_BUZZER when the queue is empty.
        """
        if not self._queue:
            return NO_BUZZER
        return self._queue[0]

    def position_of(self, buzzer: Buzzer) -> int:
        """
        Return 0-based position of a buzzer in the queue.

        Args:
            buzzer: Buzzer ID to look up.

        Returns:
            Position counted from the front, or -1 if not waiting.

        Raises:
            ValidationError: If buzzer is not an int.
        """
        validate_buzzer(buzzer)
        try:
            return self._queue.index(buzzer)
        except ValueError:
            return -1

    def buzzer_state(self, buzzer: Buzzer) -> BuzzerState:
        """
        Report where a buzzer is in its lifecycle.

        Args:
            buzzer: Buzzer ID to look up.

        Returns:
            WAITING if queued, RETIRED if in the reuse pool,
            UNALLOCATED otherwise.

        Raises:
            ValidationError: If buzzer is not an int.
        """
        validate_buzzer(buzzer)
        if buzzer in self._queue:
            return BuzzerState.WAITING
        if buzzer in self._pool:
            return BuzzerState.RETIRED
        return BuzzerState.UNALLOCATED

    def stats(self) -> QueueStats:
        """
        Produce a summary of the current queue state.

        Returns:
            QueueStats snapshot.
        """
        return QueueStats(
            length=len(self._queue),
            reusable=len(self._pool),
            issued=self.issued_count(),
            front=self.peek(),
        )

    def check_invariants(self) -> None:
        """
        Verify that queue and reuse pool partition the issued buzzers.

        Checks, in order: no duplicates in the queue, no duplicates in the
        pool, no buzzer in both, and that together they hold exactly
        ``{0, ..., issued - 1}``.

        Raises:
            InvariantViolationError: Describing the first rule that fails.
        """
        waiting = set(self._queue)
        if len(waiting) != len(self._queue):
            raise InvariantViolationError(
                "uniqueness", f"duplicate buzzers in queue {list(self._queue)}"
            )

        retired = set(self._pool)
        if len(retired) != len(self._pool):
            raise InvariantViolationError(
                "uniqueness", f"duplicate buzzers in reuse pool {self._pool}"
            )

        overlap = waiting & retired
        if overlap:
            raise InvariantViolationError(
                "disjoint", f"buzzers {sorted(overlap)} both waiting and retired"
            )

        expected = set(range(self.issued_count()))
        if waiting | retired != expected:
            missing = sorted(expected - (waiting | retired))
            extra = sorted((waiting | retired) - expected)
            raise InvariantViolationError(
                "closure", f"missing buzzers {missing}, unexpected buzzers {extra}"
            )
