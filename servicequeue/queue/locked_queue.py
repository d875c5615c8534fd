"""
Lock-guarded wrapper around ``ServiceQueue`` for use from several threads.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from servicequeue.core.types import Buzzer, BuzzerState, QueueStats
from .service_queue import ServiceQueue


class LockedServiceQueue:
    """
    Serializes every ServiceQueue operation behind one exclusive lock.

    The lock is held for the whole of each call, so operations from
    different threads never interleave.
    """

    def __init__(
        self,
        queue: Optional[ServiceQueue] = None,
        lock: Optional[Any] = None,
    ) -> None:
        """
        Initialize the wrapper.

        Args:
            queue: Queue to guard; a new empty ServiceQueue if omitted.
            lock: Lock object supporting the context manager protocol;
                a new threading.Lock if omitted.
        """
        self._inner = queue if queue is not None else ServiceQueue()
        self._lock = lock if lock is not None else threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[ServiceQueue]:
        """
        Hold the lock across several operations on the underlying queue.

        Yields:
            The wrapped ServiceQueue. It must not be used after the block.

        Example:
            with shared.locked() as queue:
                if queue.length() > 10:
                    queue.serve()
        """
        with self._lock:
            yield self._inner

    def allocate(self) -> Buzzer:
        with self._lock:
            return self._inner.allocate()

    def serve(self) -> Buzzer:
        with self._lock:
            return self._inner.serve()

    def length(self) -> int:
        with self._lock:
            return self._inner.length()

    def snapshot(self) -> List[Buzzer]:
        with self._lock:
            return self._inner.snapshot()

    def remove(self, buzzer: Buzzer) -> bool:
        with self._lock:
            return self._inner.remove(buzzer)

    def expedite(self, buzzer: Buzzer) -> bool:
        with self._lock:
            return self._inner.expedite(buzzer)

    def drain(self) -> List[Buzzer]:
        with self._lock:
            return self._inner.drain()

    def pool_size(self) -> int:
        with self._lock:
            return self._inner.pool_size()

    def reusable_buzzers(self) -> List[Buzzer]:
        with self._lock:
            return self._inner.reusable_buzzers()

    def issued_count(self) -> int:
        with self._lock:
            return self._inner.issued_count()

    def peek(self) -> Buzzer:
        with self._lock:
            return self._inner.peek()

    def position_of(self, buzzer: Buzzer) -> int:
        with self._lock:
            return self._inner.position_of(buzzer)

    def buzzer_state(self, buzzer: Buzzer) -> BuzzerState:
        with self._lock:
            return self._inner.buzzer_state(buzzer)

    def stats(self) -> QueueStats:
        with self._lock:
            return self._inner.stats()

    def check_invariants(self) -> None:
        with self._lock:
            self._inner.check_invariants()

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, buzzer: object) -> bool:
        with self._lock:
            return buzzer in self._inner

    def __repr__(self) -> str:
        with self._lock:
            return f"LockedServiceQueue({self._inner!r})"
