"""Unit tests for the system clock."""

from datetime import timedelta

from shared_kernel.clock import Clock, SystemClock


class TestSystemClock:
    """Tests for SystemClock."""

    def test_returns_aware_utc(self):
        """now() is timezone-aware UTC."""
        now = SystemClock().now()
        assert now.utcoffset() == timedelta(0)

    def test_satisfies_protocol(self):
        """SystemClock is a Clock."""
        assert isinstance(SystemClock(), Clock)
