"""
Tests for runway binding.
"""

import pytest
from xp_apt.parsers.constants import MarkingFlags
from xp_apt.parsers.rows import IgnoredRow
from xp_apt.writer.runway import bind_runway
from tests.assets.aptdat_lines import KSEA_HEADER, RUNWAY_09_27


class TestLandRunway:
    """Test cases for land runways."""

    def test_runway_geometry(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        assert len(memory_storage.runways) == 1
        runway = memory_storage.runways[0]
        assert runway.length_ft == pytest.approx(3280.84, abs=0.5)
        assert runway.width_ft == pytest.approx(98.43, abs=0.01)
        assert runway.heading_degT == pytest.approx(90.0)
        assert runway.surface == "A"
        assert runway.elevation_ft == 433.0
        assert runway.latitude_deg == pytest.approx(0.0, abs=1e-9)
        assert runway.longitude_deg == pytest.approx(0.0044966, abs=1e-6)

    def test_runway_ends(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        runway = memory_storage.runways[0]
        primary, secondary = memory_storage.runway_ends
        assert (primary.name, primary.end_type) == ("09", "P")
        assert (secondary.name, secondary.end_type) == ("27", "S")
        assert primary.runway_end_id == runway.primary_end_id
        assert secondary.runway_end_id == runway.secondary_end_id
        assert primary.heading_degT == pytest.approx(90.0)
        assert secondary.heading_degT == pytest.approx(270.0)
        assert primary.app_light_system_type is None
        assert not primary.has_reils

    def test_runway_starts(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        starts = memory_storage.starts
        assert [start.type for start in starts] == ["R", "R"]
        assert [start.runway_name for start in starts] == ["09", "27"]
        assert starts[1].runway_end_id == memory_storage.runway_ends[1].runway_end_id
        assert memory_storage.get_airport("KSEA").num_starts == 2

    def test_airport_counters(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_runways == 1
        assert airport.num_runway_hard == 1
        assert airport.num_runway_soft == 0
        assert airport.num_runway_light == 1
        assert airport.longest_runway_length_ft == pytest.approx(3280.84, abs=0.5)
        assert airport.longest_runway_surface == "A"
        assert airport.longest_runway_heading_degT == pytest.approx(90.0)

    def test_bounds_cover_both_ends(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        airport = memory_storage.get_airport("KSEA")
        assert airport.bounds_west_deg == 0.0
        assert airport.bounds_east_deg == pytest.approx(0.00899321)
        assert airport.bounds_north_deg == 0.0
        assert airport.bounds_south_deg == 0.0
        assert airport.longitude_deg == pytest.approx(0.00899321 / 2)

    def test_lights_and_markings(self, process_lines, memory_storage):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        runway = memory_storage.runways[0]
        assert runway.edge_light == "M"
        assert runway.center_light is None
        assert runway.shoulder is None
        assert runway.marking_flags & MarkingFlags.PRECISION

    def test_approach_lights(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "100 45.00 2 2 0.25 1 3 1 "
            "16 47.00 -122.00 100 60 3 8 1 1 "
            "34 46.99 -122.00 0 0 2 0 0 0",
        ])

        runway = memory_storage.runways[0]
        primary, secondary = memory_storage.runway_ends
        assert runway.surface == "C"
        assert runway.shoulder == "C"
        assert runway.center_light == "M"
        assert runway.edge_light == "H"
        assert primary.app_light_system_type == "MALSR"
        assert primary.has_reils
        assert primary.has_touchdown_lights
        assert primary.offset_threshold_ft == pytest.approx(328.08, abs=0.01)
        assert secondary.app_light_system_type is None
        assert memory_storage.get_airport("KSEA").num_runway_end_als == 1

    def test_unlit_soft_runway(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "100 20.00 3 0 0.25 0 0 0 "
            "04 47.00 -122.00 0 0 1 0 0 0 "
            "22 47.01 -121.99 0 0 1 0 0 0",
        ])

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_runway_soft == 1
        assert airport.num_runway_light == 0
        assert memory_storage.runways[0].edge_light is None

    def test_longest_runway(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "100 20.00 3 0 0.25 0 0 0 "
            "04 0.00 0.00 0 0 1 0 0 0 "
            "22 0.00 0.001 0 0 1 0 0 0",
            RUNWAY_09_27,
        ])

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_runways == 2
        assert airport.longest_runway_surface == "A"
        assert airport.longest_runway_width_ft == pytest.approx(98.43, abs=0.01)

    def test_closed_airport_marks_ends(self, process_lines, memory_storage):
        process_lines(["1 0 0 0 KXXX [X] Old Field", RUNWAY_09_27])

        airport = memory_storage.get_airport("KXXX")
        assert airport.is_closed
        assert airport.name == "Old Field"
        assert all(end.has_closed_markings for end in memory_storage.runway_ends)


class TestWaterRunway:
    """Test cases for water runways."""

    def test_water_runway(self, process_lines, memory_storage):
        process_lines([
            "16 0 0 0 X07 Lake Seaplane Base",
            "101 49.00 1 08 0.00 0.00 26 0.00 0.01",
        ])

        airport = memory_storage.get_airport("X07")
        runway = memory_storage.runways[0]
        assert airport.airport_type == "seaplane"
        assert airport.num_runway_water == 1
        assert airport.num_runways == 1
        assert runway.surface == "W"
        assert runway.edge_light is None
        assert [end.name for end in memory_storage.runway_ends] == ["08", "26"]


class TestInvalidRunwayRows:
    """Runways with bad data are written with what could be read."""

    def test_end_out_of_range(self, process_lines, memory_storage, caplog):
        process_lines([KSEA_HEADER, RUNWAY_09_27.replace("0.00899321", "-181.00000000")])

        assert "Invalid runway end 27 position" in caplog.text
        assert len(memory_storage.runways) == 1
        runway = memory_storage.runways[0]
        assert runway.length_ft == 0.0
        assert runway.primary_latitude_deg == pytest.approx(0.0)
        assert runway.secondary_longitude_deg is None
        assert runway.longitude_deg == pytest.approx(0.0)

        primary, secondary = memory_storage.runway_ends
        assert primary.longitude_deg == pytest.approx(0.0)
        assert secondary.latitude_deg is None
        assert secondary.heading_degT == pytest.approx(180.0)
        assert len(memory_storage.starts) == 2

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_runways == 1
        assert airport.latitude_deg == pytest.approx(0.0)

    def test_unknown_row_type(self, session, context, memory_storage, process_lines, caplog):
        process_lines([KSEA_HEADER], finish=False)
        bind_runway(session, IgnoredRow(row_code=100), context)
        session.finish(context)

        assert "Invalid runway row code 100" in caplog.text
        runway = memory_storage.runways[0]
        assert runway.surface == "UNKNOWN"
        assert runway.length_ft == 0.0
        assert runway.latitude_deg is None
        assert [end.latitude_deg for end in memory_storage.runway_ends] == [None, None]
        assert memory_storage.get_airport("KSEA").num_runways == 1
