"""
Tests for service queue exceptions.


Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from servicequeue.exceptions import (
    InvariantViolationError,
    ServiceQueueError,
    ValidationError,
)


class TestExceptions:
    """Test exception hierarchy and messages."""

    def test_validation_error(self):
        """Test ValidationError fields and message."""
        error = ValidationError("buzzer", "3", "expected int, got str")

        assert isinstance(error, ServiceQueueError)
        assert error.field == "buzzer"
        assert error.value == "3"
        assert error.reason == "expected int, got str"
        assert str(error) == "Validation error for field 'buzzer': expected int, got str"

    def test_invariant_violation_error(self):
        """Test InvariantViolationError fields and message."""
        error = InvariantViolationError("closure", "missing buzzers [1]")

        assert isinstance(error, ServiceQueueError)
        assert error.rule == "closure"
        assert error.details == "missing buzzers [1]"
        assert str(error) == (
            "Service queue invariant 'closure' violated: missing buzzers [1]"
        )
