"""Tests for the Uptime value object."""

from watchbot.domain.models import Uptime


class TestUptime:
    def test_zero(self):
        assert Uptime.from_seconds(0) == Uptime(0, 0, 0)

    def test_floors_partial_minute(self):
        assert Uptime.from_seconds(119.99) == Uptime(0, 0, 1)

    def test_components_are_exclusive_remainders(self):
        # 2 days, 3 hours, 4 minutes, 5 seconds
        assert Uptime.from_seconds(2 * 86400 + 3 * 3600 + 4 * 60 + 5) == Uptime(2, 3, 4)

    def test_describe(self):
        assert Uptime.from_seconds(90000).describe() == "1 days, 1 hours, and 0 minutes"
