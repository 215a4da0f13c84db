"""
Tests for apt.dat enumeration tables.
"""

import pytest
from xp_apt.parsers.constants import (
    APPROACH_INDICATORS, ApproachIndicator, MarkingFlags, Surface,
    approach_lights_to_db, marking_to_flags, surface_from_code, surface_to_db,
)


class TestSurfaces:
    """Test cases for surface decoding."""

    @pytest.mark.parametrize("code,surface", [
        (1, Surface.ASPHALT),
        (2, Surface.CONCRETE),
        (3, Surface.TURF_OR_GRASS),
        (13, Surface.WATER),
        (15, Surface.TRANSPARENT),
        (20, Surface.ASPHALT),
        (38, Surface.ASPHALT),
        (50, Surface.CONCRETE),
        (57, Surface.CONCRETE),
    ])
    def test_known_codes(self, code, surface):
        assert surface_from_code(code) is surface

    def test_unknown_code(self, caplog):
        assert surface_from_code(99) is Surface.UNKNOWN
        assert "Invalid surface code 99" in caplog.text

    def test_db_codes(self):
        assert surface_to_db(Surface.ASPHALT) == "A"
        assert surface_to_db(Surface.WATER) == "W"
        assert surface_to_db(Surface.UNKNOWN) == "UNKNOWN"


class TestMarkings:
    def test_precision(self):
        flags = marking_to_flags(3)
        assert flags & MarkingFlags.PRECISION
        assert flags & MarkingFlags.THRESHOLD

    def test_uk_precision(self):
        flags = marking_to_flags(5)
        assert flags & MarkingFlags.ALTERNATE_PRECISION
        assert not flags & MarkingFlags.PRECISION

    def test_invalid(self):
        assert marking_to_flags(42) == MarkingFlags.NO_FLAGS


class TestLights:
    def test_approach_lights(self):
        assert approach_lights_to_db(0) is None
        assert approach_lights_to_db(8) == "MALSR"
        assert approach_lights_to_db(77) is None

    def test_approach_indicators(self):
        assert APPROACH_INDICATORS[ApproachIndicator.VASI] == "VASI22"
        assert APPROACH_INDICATORS[ApproachIndicator.PAPI_4R] == "PAPI4"
