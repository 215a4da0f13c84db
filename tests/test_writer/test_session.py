"""
Tests for the airport session state machine.
"""

import pytest
from xp_apt.parsers.rows import parse_line
from xp_apt.writer.session import IdCounters, SessionState
from tests.assets.aptdat_lines import KSEA_HEADER, RUNWAY_09_27


class TestIdCounters:
    def test_next(self):
        ids = IdCounters()
        assert ids.next('runway') == 1
        assert ids.next('runway') == 2
        assert ids.next('apron') == 1
        assert ids.runway == 2


class TestAirportSession:
    """Test cases for state transitions."""

    def test_initial_state(self, session):
        assert session.state is SessionState.IDLE
        assert not session.is_writing
        assert not session.is_ignoring

    def test_header_starts_writing(self, session, context):
        session.process(parse_line(KSEA_HEADER), context)
        assert session.is_writing
        assert session.airport.ident == "KSEA"

    def test_finish_returns_to_idle(self, session, context, memory_storage):
        session.process(parse_line(KSEA_HEADER), context)
        session.finish(context)
        assert session.state is SessionState.IDLE
        assert len(memory_storage.airports) == 1

        # A second finish writes nothing
        session.finish(context)
        assert len(memory_storage.airports) == 1

    def test_duplicate_is_ignoring(self, session, context):
        session.process(parse_line(KSEA_HEADER), context)
        session.process(parse_line(KSEA_HEADER), context)
        assert session.is_ignoring

    def test_row_outside_airport(self, process_lines, memory_storage, caplog):
        process_lines([RUNWAY_09_27])

        assert "land_runway row outside of an airport" in caplog.text
        assert memory_storage.airports == []

    def test_ignored_rows(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            "18 47.0 -122.0 1 BCN",
            "20 47.0 -122.0 0 0 0 {@L}A",
            "1000 Calm",
            RUNWAY_09_27,
        ])

        assert len(memory_storage.airports) == 1
        assert len(memory_storage.runways) == 1

    def test_ids_continue_across_airports(self, process_lines, memory_storage):
        process_lines([
            KSEA_HEADER,
            RUNWAY_09_27,
            "1 21 0 0 KBFI Boeing Field",
            RUNWAY_09_27,
        ])

        assert [runway.runway_id for runway in memory_storage.runways] == [1, 2]
        assert [end.runway_end_id for end in memory_storage.runway_ends] == [1, 2, 3, 4]
        assert [start.start_id for start in memory_storage.starts] == [1, 2, 3, 4]
        assert memory_storage.runways[1].airport_id == memory_storage.get_airport("KBFI").airport_id

    def test_runway_ends_registered(self, process_lines, session):
        process_lines([KSEA_HEADER, RUNWAY_09_27])

        assert "KSEA" in session.airport_index
        assert session.airport_index.get_runway_end_id("KSEA", "27") == 2
