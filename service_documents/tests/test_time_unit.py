"""
Unit tests for rate window time units.
"""

import pytest

from service_documents.app.ratelimit import TimeUnit
from shared.errors import ConstructionError


class TestTimeUnit:
    """Test cases for TimeUnit."""

    @pytest.mark.parametrize("unit, amount, expected", [
        (TimeUnit.MILLISECONDS, 500, 0.5),
        (TimeUnit.SECONDS, 5, 5.0),
        (TimeUnit.MINUTES, 5, 300.0),
        (TimeUnit.HOURS, 1, 3600.0),
        (TimeUnit.DAYS, 2, 172800.0),
    ])
    def test_to_seconds(self, unit, amount, expected):
        """Test unit conversion to seconds."""
        assert unit.to_seconds(amount) == pytest.approx(expected)

    def test_parse_is_case_insensitive(self):
        """Test parsing unit names regardless of case."""
        assert TimeUnit.parse("MINUTES") is TimeUnit.MINUTES
        assert TimeUnit.parse(" seconds ") is TimeUnit.SECONDS
        assert TimeUnit.parse(TimeUnit.HOURS) is TimeUnit.HOURS

    def test_parse_unknown_unit(self):
        """Test unknown unit names raise a construction error."""
        with pytest.raises(ConstructionError) as exc_info:
            TimeUnit.parse("fortnights")

        assert "seconds" in exc_info.value.details["allowed"]
