"""
Tests for the in-memory sink.
"""

import pytest
from xp_apt.models import AirportRecord, RunwayEnd
from xp_apt.storage.memory_storage import MemoryStorage


class TestMemoryStorage:
    """Test cases for MemoryStorage."""

    def test_write_and_find(self):
        storage = MemoryStorage()
        storage.write_airport(AirportRecord(airport_id=1, ident="KSEA"))
        storage.write_airport(AirportRecord(airport_id=2, ident="KBFI"))

        assert storage.get_airport("KBFI").airport_id == 2
        assert storage.get_airport("EDDF") is None

    def test_runway_end_batches(self):
        storage = MemoryStorage()
        storage.write_runway_ends([
            RunwayEnd(runway_end_id=1, airport_id=1, name="09", end_type="P"),
            RunwayEnd(runway_end_id=2, airport_id=1, name="27", end_type="S"),
        ])
        storage.write_runway_ends([])

        counts = storage.get_counts()
        assert counts['runway_ends'] == 2
        assert counts['airports'] == 0
