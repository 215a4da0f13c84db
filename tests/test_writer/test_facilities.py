"""
Tests for com frequencies, VASI, taxi paths, helipads and aprons.
"""

import pytest
from xp_apt.models import RunwayEnd
from xp_apt.writer.com import weather_type
from xp_apt.writer.taxi import clean_taxi_name
from xp_apt.writer.vasi import find_runway_end
from tests.assets.aptdat_lines import KSEA_HEADER, RUNWAY_09_27


class TestCom:
    """Test cases for com frequency rows."""

    def test_frequencies(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "54 11830 TWR",
            "1054 118305 SEA TWR",
            "50 12345 SEA ATIS",
            "1050 128655 SEA ASOS",
            "51 12280 CTAF",
            "53 12190 GND",
        ])

        coms = memory_storage.coms
        assert [(com.type, com.frequency) for com in coms] == [
            ("T", 118300),
            ("T", 118305),
            ("ATIS", 123450),
            ("ASOS", 128655),
            ("UC", 122800),
            ("G", 121900),
        ]
        airport = memory_storage.get_airport("KSEA")
        assert airport.num_com == 6
        assert airport.tower_frequency == 118305
        assert airport.atis_frequency == 123450
        assert airport.asos_frequency == 128655
        assert airport.unicom_frequency == 122800
        assert airport.awos_frequency is None

    def test_weather_type(self):
        assert weather_type("KSEA AWOS-3") == ("AWOS", "awos_frequency")
        assert weather_type("Weather") == ("ATIS", "atis_frequency")


class TestVasi:
    """Test cases for attaching approach indicators to runway ends."""

    def make_ends(self):
        return [
            RunwayEnd(runway_end_id=1, airport_id=1, name="09", end_type="P", heading_degT=90.0),
            RunwayEnd(runway_end_id=2, airport_id=1, name="27", end_type="S", heading_degT=270.0),
        ]

    def test_find_by_name(self):
        assert find_runway_end(self.make_ends(), "27", 90.0).name == "27"

    def test_find_by_heading(self):
        assert find_runway_end(self.make_ends(), "", 95.0).name == "09"
        assert find_runway_end(self.make_ends(), "XX", 262.0).name == "27"

    def test_no_match(self):
        assert find_runway_end(self.make_ends(), "", 180.0) is None
        assert find_runway_end([], "09", 90.0) is None

    def test_bind_vasi(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            RUNWAY_09_27,
            "21 0.0 0.0 2 90.0 3.00 09 PAPI-4L",
            "21 0.0 0.009 1 268.0 2.50 XX VASI",
        ])

        primary, secondary = memory_storage.runway_ends
        assert primary.left_vasi_type == "PAPI4"
        assert primary.left_vasi_pitch == 3.0
        assert primary.right_vasi_type == "UNKN"
        assert primary.right_vasi_pitch == 0.0
        assert secondary.left_vasi_type == "VASI22"
        assert secondary.left_vasi_pitch == 2.5
        assert memory_storage.get_airport("KSEA").num_runway_end_vasi == 2

    def test_ignored_and_invalid_indicators(self, process_lines, memory_storage, caplog):
        process_lines([
            KSEA_HEADER,
            RUNWAY_09_27,
            "21 0.0 0.0 6 90.0 3.00 09 Guard",
            "21 0.0 0.0 9 90.0 3.00 09 Unknown",
            "21 0.0 0.0 2 180.0 3.00 XX Nowhere",
        ])

        assert all(end.left_vasi_type is None for end in memory_storage.runway_ends)
        assert memory_storage.get_airport("KSEA").num_runway_end_vasi == 0
        assert "Invalid approach indicator type 9" in caplog.text
        assert "No runway end 'XX'" in caplog.text


class TestTaxi:
    """Test cases for the taxi route network."""

    def test_taxi_paths(self, process_lines, memory_storage, caplog):
        process_lines([
            KSEA_HEADER,
            "1201 0.0 0.0 both 0 A1",
            "1201 0.0 0.001 both 1 A2",
            "1202 0 1 twoway taxiway A",
            "1202 0 1 twoway runway 09/27",
            "1202 0 1 twoway taxiway TAXIWAY",
            "1202 0 5 twoway taxiway B",
        ])

        paths = memory_storage.taxi_paths
        assert len(paths) == 3
        assert paths[0].name == "A"
        assert paths[0].start_longitude_deg == 0.0
        assert paths[0].end_longitude_deg == 0.001
        assert paths[1].name == ""
        assert paths[2].end_latitude_deg is None
        assert "Taxi node 5 not found" in caplog.text

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_taxi_path == 3
        assert airport.bounds_east_deg == 0.001

    def test_clean_taxi_name(self):
        assert clean_taxi_name("  A   B ") == "A B"
        assert clean_taxi_name("unnamed") == ""
        assert clean_taxi_name("*") == ""
        assert clean_taxi_name("K3") == "K3"


class TestHelipad:
    """Test cases for helipads and their start positions."""

    def test_helipads(self, process_lines, memory_storage):
        process_lines([
            "17 100 0 0 H01 Hospital [H]",
            "102 H1 0.0 0.0 45.0 20.0 20.0 15 0 0 0.25 0",
            "102 H2 0.0 0.001 0.0 10.0 10.0 1 0 0 0.25 0",
        ])

        airport = memory_storage.get_airport("H01")
        assert airport.airport_type == "heliport"
        assert airport.name == "Hospital"
        assert airport.num_helipad == 2
        assert airport.num_starts == 2

        starts = memory_storage.starts
        assert [start.type for start in starts] == ["H", "H"]
        assert [start.runway_name for start in starts] == ["01", "02"]
        assert [start.number for start in starts] == [1, 2]

        first, second = memory_storage.helipads
        assert first.start_id == starts[0].start_id
        assert first.is_transparent
        assert first.surface == "TR"
        assert first.length_ft == pytest.approx(65.62, abs=0.01)
        assert first.heading_degT == 45.0
        assert second.surface == "A"
        assert not second.is_transparent
        assert second.elevation_ft == 100.0


class TestPavement:
    """Test cases for aprons from pavement polygons."""

    def test_aprons(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "110 1 0.25 0.00 Main apron",
            "111 0.0 0.0",
            "111 0.0 0.01",
            "113 0.01 0.01",
            "110 2 0.25 0.00 Second apron",
            "111 0.02 0.02",
            "112 0.02 0.03 0.025 0.035",
            "113 0.03 0.03",
            "120 Line",
            "111 1.0 1.0",
            "115 1.0 1.1",
        ])

        aprons = memory_storage.aprons
        assert len(aprons) == 2
        assert [apron.surface for apron in aprons] == ["A", "C"]
        assert len(aprons[0].geometry.boundary) == 3
        assert aprons[1].geometry.boundary[1].has_control

        airport = memory_storage.get_airport("KSEA")
        assert airport.num_apron == 2
        assert airport.bounds_north_deg == 1.0

    def test_degenerate_hole(self, process_lines, memory_storage, caplog):
        process_lines([
            KSEA_HEADER,
            "110 1 0.25 0.00 Main apron",
            "111 0.0 0.0",
            "111 0.0 0.01",
            "113 0.01 0.01",
            "113 0.005 0.005",
        ])

        assert len(memory_storage.aprons) == 1
        assert len(memory_storage.aprons[0].geometry.holes) == 1
        assert "hole 0 has 1 nodes" in caplog.text

    def test_pending_polygon_belongs_to_previous_airport(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "110 1 0.25 0.00 Main apron",
            "111 0.0 0.0",
            "111 0.0 0.01",
            "113 0.01 0.01",
            "1 21 0 0 KBFI Boeing Field",
        ])

        ksea = memory_storage.get_airport("KSEA")
        assert memory_storage.aprons[0].airport_id == ksea.airport_id
        assert ksea.num_apron == 1
        assert memory_storage.get_airport("KBFI").num_apron == 0


class TestInvalidPositions:
    """Rows with coordinates out of range are kept without a position."""

    def test_helipad(self, process_lines, memory_storage, caplog):
        process_lines([
            "17 100 0 0 H01 Hospital",
            "102 H1 95.0 0.0 45.0 20.0 20.0 1 0 0 0.25 0",
        ])

        assert "Invalid helipad H1 position" in caplog.text
        assert memory_storage.helipads[0].latitude_deg is None
        assert memory_storage.starts[0].longitude_deg is None
        assert memory_storage.get_airport("H01").num_helipad == 1

    def test_taxi_node_and_parking(self, process_lines, memory_storage, caplog):
        process_lines([
            KSEA_HEADER,
            RUNWAY_09_27,
            "1201 0.0 200.0 both 1 A",
            "1201 0.0 0.001 both 2 A",
            "1202 1 2 twoway taxiway A",
            "1300 -91.0 0.0 90.0 gate jets A1",
        ])

        assert "Invalid taxi node 1 position" in caplog.text
        assert "Taxi node 1 not found" in caplog.text
        path = memory_storage.taxi_paths[0]
        assert path.start_latitude_deg is None
        assert path.end_longitude_deg == pytest.approx(0.001)

        assert "Invalid parking 'A1' position" in caplog.text
        parking = memory_storage.parkings[0]
        assert parking.type == "G"
        assert parking.latitude_deg is None

    def test_tower(self, process_lines, memory_storage, caplog):
        process_lines([KSEA_HEADER, RUNWAY_09_27, "14 0.0 -200.0 100 0 Tower"])

        assert "Invalid tower position" in caplog.text
        airport = memory_storage.get_airport("KSEA")
        assert airport.has_tower_object
        assert airport.tower_longitude_deg is None
