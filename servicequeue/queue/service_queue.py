"""
Take-a-number service queue with reusable buzzer IDs.

Customers are handed integer buzzers, wait in FIFO order, and are either
served from the front, removed from anywhere in the line, or expedited to
the front. Buzzers that leave the queue go onto a reuse stack and are handed
out again, most recently retired first. New buzzers are only minted when the
stack is empty, which keeps every issued buzzer inside ``{0, ..., issued-1}``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from servicequeue.core.types import NO_BUZZER, Buzzer
from .service_queue_metrics import ServiceQueueMetricsMixin, validate_buzzer

logger = logging.getLogger("servicequeue.queue.service_queue")


class ServiceQueue(ServiceQueueMetricsMixin):
    """
    FIFO line of buzzer IDs plus a LIFO pool of buzzers available for reuse.

    Not thread-safe; see LockedServiceQueue for shared use.
    """

    def __init__(self) -> None:
        """Initialize an empty queue with an empty reuse pool."""
        self._queue: Deque[Buzzer] = deque()
        self._pool: List[Buzzer] = []

    def allocate(self) -> Buzzer:
        """
        Hand out a buzzer and place it at the back of the queue.

        The most recently retired buzzer is reused when one exists. Otherwise
        the queue already holds exactly ``{0, ..., N-1}``, so ``N`` is the
        smallest unused ID.

        Returns:
            Buzzer ID assigned to the new entry.
        """
        if self._pool:
            buzzer = self._pool.pop()
        else:
            buzzer = len(self._queue)

        self._queue.append(buzzer)
        logger.debug(f"Allocated buzzer {buzzer} (queue length {len(self._queue)})")
        return buzzer

    def serve(self) -> Buzzer:
        """
        Remove the entry at the front of the queue.

        The served buzzer becomes the next one to be reused.

        Returns:
            Served buzzer ID, or NO_BUZZER if the queue is empty.
        """
        if not self._queue:
            logger.debug("Serve requested on empty queue")
            return NO_BUZZER

        buzzer = self._queue.popleft()
        self._pool.append(buzzer)
        logger.debug(f"Served buzzer {buzzer}")
        return buzzer

    def length(self) -> int:
        """
        Get the number of waiting entries.

        Returns:
            Current queue length.
        """
        return len(self._queue)

    def snapshot(self) -> List[Buzzer]:
        """
        Return the queue contents front to back.

        Returns:
            New list of buzzer IDs; changing it does not affect the queue.
        """
        return list(self._queue)

    def remove(self, buzzer: Buzzer) -> bool:
        """
        Take a buzzer out of the queue wherever it stands.

        Remaining entries keep their relative order and the removed buzzer
        becomes the next one to be reused.

        Args:
            buzzer: Buzzer ID to remove.

        Returns:
            True if the buzzer was waiting, False if the queue is unchanged.

        Raises:
            ValidationError: If buzzer is not an int.
        """
        validate_buzzer(buzzer)
        if buzzer not in self._queue:
            logger.debug(f"Cannot remove buzzer {buzzer}: not in queue")
            return False

        self._queue.remove(buzzer)
        self._pool.append(buzzer)
        logger.info(f"Removed buzzer {buzzer} from queue")
        return True

    def expedite(self, buzzer: Buzzer) -> bool:
        """
        Move a waiting buzzer to the front of the queue.

        The buzzer keeps its ID and does not pass through the reuse pool.

        Args:
            buzzer: Buzzer ID to move.

        Returns:
            True if the buzzer was waiting, False if the queue is unchanged.

        Raises:
            ValidationError: If buzzer is not an int.
        """
        validate_buzzer(buzzer)
        if buzzer not in self._queue:
            logger.debug(f"Cannot expedite buzzer {buzzer}: not in queue")
            return False

        self._queue.remove(buzzer)
        self._queue.appendleft(buzzer)
        logger.info(f"Expedited buzzer {buzzer} to front of queue")
        return True

    def drain(self) -> List[Buzzer]:
        """
        Serve every waiting entry in order.

        Returns:
            Served buzzer IDs, front first. Empty if nobody was waiting.
        """
        served = []
        while self._queue:
            served.append(self.serve())
        if served:
            logger.info(f"Drained {len(served)} buzzers from queue")
        return served

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, buzzer: object) -> bool:
        return buzzer in self._queue

    def __repr__(self) -> str:
        return f"ServiceQueue(queue={list(self._queue)}, pool={self._pool})"
