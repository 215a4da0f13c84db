"""
Tests for row code classification.
"""

import pytest
from xp_apt.parsers.row_codes import AirportRowCode, RowKind, classify_row_code, parse_row_code


class TestClassifyRowCode:
    """Test cases for mapping row codes to kinds."""

    @pytest.mark.parametrize("code,kind", [
        (1, RowKind.AIRPORT_HEADER),
        (16, RowKind.AIRPORT_HEADER),
        (17, RowKind.AIRPORT_HEADER),
        (100, RowKind.LAND_RUNWAY),
        (101, RowKind.WATER_RUNWAY),
        (102, RowKind.HELIPAD),
        (110, RowKind.PAVEMENT_HEADER),
        (111, RowKind.PAVEMENT_NODE),
        (114, RowKind.PAVEMENT_NODE),
        (14, RowKind.VIEWPOINT),
        (15, RowKind.START),
        (21, RowKind.LIGHTING_OBJECT),
        (1201, RowKind.TAXI_NODE),
        (1202, RowKind.TAXI_EDGE),
        (1300, RowKind.STARTUP_LOCATION),
        (1301, RowKind.STARTUP_METADATA),
        (1302, RowKind.METADATA),
        (1400, RowKind.TRUCK_LOCATION),
        (1401, RowKind.TRUCK_LOCATION),
        (50, RowKind.COM),
        (56, RowKind.COM),
        (1050, RowKind.COM),
        (1056, RowKind.COM),
        (99, RowKind.END_OF_FILE),
    ])
    def test_known_codes(self, code, kind):
        assert classify_row_code(code) is kind

    @pytest.mark.parametrize("code", [0, 18, 19, 20, 115, 116, 120, 130, 1000, 1100, 1200, 1204, 9999, -1])
    def test_unused_codes_are_ignored(self, code):
        """Signs, beacons, linear features, flows and unknown codes are ignored."""
        assert classify_row_code(code) is RowKind.IGNORED


class TestParseRowCode:
    """Test cases for parsing the first field."""

    def test_integer(self):
        assert parse_row_code("1300") == 1300

    def test_invalid(self):
        assert parse_row_code("abc") == AirportRowCode.NO_ROWCODE
        assert parse_row_code("") == AirportRowCode.NO_ROWCODE
        assert parse_row_code(None) == AirportRowCode.NO_ROWCODE
