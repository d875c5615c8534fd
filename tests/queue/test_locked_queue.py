"""
Tests for lock-guarded service queue.


Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import threading
from unittest.mock import MagicMock

import pytest

from servicequeue.core.types import NO_BUZZER, BuzzerState, QueueStats
from servicequeue.exceptions import ValidationError
from servicequeue.queue.locked_queue import LockedServiceQueue
from servicequeue.queue.service_queue import ServiceQueue


class TestLockedServiceQueue:
    """Test LockedServiceQueue forwarding and locking."""

    def setup_method(self):
        """Set up test fixtures."""
        self.shared = LockedServiceQueue()

    def test_initialization_defaults(self):
        """Test a fresh wrapper owns an empty queue."""
        assert isinstance(self.shared._inner, ServiceQueue)
        assert self.shared.length() == 0
        assert len(self.shared) == 0

    def test_wraps_existing_queue(self):
        """Test an existing queue is used as is."""
        queue = ServiceQueue()
        queue.allocate()
        shared = LockedServiceQueue(queue)

        assert shared.snapshot() == [0]
        shared.allocate()
        assert queue.snapshot() == [0, 1]

    def test_operations_forwarded(self):
        """Test every operation reaches the wrapped queue."""
        for _ in range(4):
            self.shared.allocate()

        assert self.shared.serve() == 0
        assert self.shared.remove(2) is True
        assert self.shared.remove(2) is False
        assert self.shared.expedite(3) is True
        assert self.shared.expedite(0) is False
        assert self.shared.snapshot() == [3, 1]
        assert self.shared.peek() == 3
        assert self.shared.position_of(1) == 1
        assert self.shared.pool_size() == 2
        assert self.shared.reusable_buzzers() == [2, 0]
        assert self.shared.issued_count() == 4
        assert self.shared.buzzer_state(2) == BuzzerState.RETIRED
        assert self.shared.stats() == QueueStats(length=2, reusable=2, issued=4, front=3)
        assert 3 in self.shared
        assert 0 not in self.shared
        self.shared.check_invariants()
        assert self.shared.drain() == [3, 1]
        assert self.shared.serve() == NO_BUZZER

    def test_repr(self):
        """Test repr includes the wrapped queue."""
        self.shared.allocate()
        assert repr(self.shared) == "LockedServiceQueue(ServiceQueue(queue=[0], pool=[]))"

    def test_validation_error_releases_lock(self):
        """Test the lock is released when an operation raises."""
        with pytest.raises(ValidationError):
            self.shared.remove("0")

        assert self.shared._lock.acquire(blocking=False)
        self.shared._lock.release()

    def test_custom_lock_used(self):
        """Test a caller-supplied lock guards each call."""
        lock = MagicMock()
        shared = LockedServiceQueue(lock=lock)

        shared.allocate()
        shared.serve()

        assert lock.__enter__.call_count == 2
        assert lock.__exit__.call_count == 2

    def test_locked_context(self):
        """Test locked() holds the lock and yields the inner queue."""
        with self.shared.locked() as queue:
            assert queue is self.shared._inner
            assert not self.shared._lock.acquire(blocking=False)
            queue.allocate()
            queue.allocate()

        assert self.shared.snapshot() == [0, 1]

    def test_concurrent_allocate_and_serve(self):
        """Test buzzers stay unique under concurrent use."""
        served = []
        served_lock = threading.Lock()

        def worker():
            for _ in range(200):
                self.shared.allocate()
                buzzer = self.shared.serve()
                if buzzer != NO_BUZZER:
                    with served_lock:
                        served.append(buzzer)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(served) == 1600
        assert self.shared.length() == 0
        self.shared.check_invariants()
        assert self.shared.issued_count() <= 8
