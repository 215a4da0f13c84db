"""
Tests for airport ident filters.
"""

import pytest
from xp_apt.utils.filters import AirportFilter


class TestAirportFilter:
    """Test cases for include and exclude patterns."""

    def test_no_patterns(self):
        assert AirportFilter().is_included("KSEA")
        assert AirportFilter(include=[], exclude=[" "]).is_included("")

    def test_include(self):
        airport_filter = AirportFilter(include=["ED*", "LFPG"])
        assert airport_filter.is_included("EDDF")
        assert airport_filter.is_included("lfpg")
        assert not airport_filter.is_included("LFPO")

    def test_exclude_only(self):
        airport_filter = AirportFilter(exclude=["K???"])
        assert not airport_filter.is_included("KSEA")
        assert airport_filter.is_included("EDDF")
        assert airport_filter.is_included("KSEA1")

    def test_exclude_wins(self):
        airport_filter = AirportFilter(include=["K*"], exclude=["KBFI"])
        assert airport_filter.is_included("KSEA")
        assert not airport_filter.is_included("KBFI")

    def test_whole_ident(self):
        """Patterns match the whole ident, not a prefix."""
        assert not AirportFilter(include=["ED"]).is_included("EDDF")
