"""
Airport session: the state machine reading the rows of apt.dat files.

Rows must be passed in file order. An airport block starts at a header
row and ends at the next header or when finish() is called. All entities
of a block except the airport record and its runway ends are written to
the sink as soon as they are complete. The airport record is written at
the end of the block together with its counters, bounding rectangle and
the runway ends.

Typical usage:
    session = AirportSession(MemoryStorage())
    context = ReaderContext(file_id=1, file_name="apt.dat")
    for row in rows:
        session.process(row, context)
    session.finish(context)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..models import AirportRecord, BoundingRect, NavPoint, Parking, RunwayEnd
from ..parsers.pavement import PavementAssembler
from ..parsers.row_codes import RowKind
from ..parsers.rows import Row
from ..storage.base import SinkInterface
from ..utils.airport_index import AirportIndex
from ..utils.airport_name import AirportNameCleaner
from ..utils.filters import AirportFilter
from ..utils.progress import ProgressHandler
from .context import ReaderContext
from . import airport, com, helipad, parking, pavement, runway, taxi, vasi

logger = logging.getLogger(__name__)

class SessionState(Enum):
    IDLE = "idle"
    WRITING = "writing"
    IGNORING = "ignoring"


@dataclass
class IdCounters:
    """Last ids handed out per entity. Ids are unique across all files of a load."""

    airport: int = 0
    airport_file: int = 0
    runway: int = 0
    runway_end: int = 0
    start: int = 0
    helipad: int = 0
    com: int = 0
    parking: int = 0
    taxi_path: int = 0
    apron: int = 0

    def next(self, name: str) -> int:
        value = getattr(self, name) + 1
        setattr(self, name, value)
        return value


@dataclass
class AirportAccumulator:
    """Everything collected for the current airport block."""

    airport: AirportRecord
    rect: Optional[BoundingRect] = None
    datum_latitude: Optional[float] = None
    datum_longitude: Optional[float] = None
    longest_runway_center: Optional[NavPoint] = None
    runway_ends: List[RunwayEnd] = field(default_factory=list)
    taxi_nodes: Dict[int, NavPoint] = field(default_factory=dict)
    helipad_start_number: int = 0

    def extend_rect(self, point: Optional[NavPoint]) -> None:
        if point is None:
            return
        if self.rect is None:
            self.rect = BoundingRect.from_point(point)
        else:
            self.rect.extend(point)

    @property
    def datum(self) -> Optional[NavPoint]:
        """Datum from metadata rows, only valid if both coordinates were given."""
        if self.datum_latitude is None or self.datum_longitude is None:
            return None
        return NavPoint(latitude=self.datum_latitude, longitude=self.datum_longitude)


Binder = Callable[['AirportSession', Row, ReaderContext], None]

_BINDERS: Dict[RowKind, Binder] = {
    RowKind.LAND_RUNWAY: runway.bind_runway,
    RowKind.WATER_RUNWAY: runway.bind_runway,
    RowKind.HELIPAD: helipad.bind_helipad,
    RowKind.PAVEMENT_HEADER: pavement.bind_pavement_header,
    RowKind.PAVEMENT_NODE: pavement.bind_pavement_node,
    RowKind.VIEWPOINT: airport.bind_viewpoint,
    RowKind.START: parking.bind_start,
    RowKind.STARTUP_LOCATION: parking.bind_startup_location,
    RowKind.STARTUP_METADATA: parking.bind_startup_metadata,
    RowKind.LIGHTING_OBJECT: vasi.bind_vasi,
    RowKind.TAXI_NODE: taxi.bind_taxi_node,
    RowKind.TAXI_EDGE: taxi.bind_taxi_edge,
    RowKind.METADATA: airport.bind_metadata,
    RowKind.TRUCK_LOCATION: airport.bind_fuel,
    RowKind.COM: com.bind_com,
}

# Rows which do not end a pending pavement polygon
_PAVEMENT_KINDS = frozenset({RowKind.PAVEMENT_HEADER, RowKind.PAVEMENT_NODE})


class AirportSession:
    """
    Reads airport blocks row by row and writes the entities to a sink.

    A session can read any number of files. The airport index detects
    airports already read from an earlier file, these and airports
    rejected by the filter are skipped completely.
    """

    def __init__(self, sink: SinkInterface,
                 airport_index: Optional[AirportIndex] = None,
                 airport_filter: Optional[AirportFilter] = None,
                 progress: Optional[ProgressHandler] = None,
                 name_cleaner: Optional[AirportNameCleaner] = None):
        self.sink = sink
        self.airport_index = airport_index or AirportIndex()
        self.airport_filter = airport_filter or AirportFilter()
        self.progress = progress or ProgressHandler()
        self.name_cleaner = name_cleaner or AirportNameCleaner()

        self.ids = IdCounters()
        self.state = SessionState.IDLE
        self.pavement = PavementAssembler()
        self.pending_parking: Optional[Parking] = None
        self.accumulator = self._new_accumulator()

    @property
    def airport(self) -> AirportRecord:
        """Record of the current airport block."""
        return self.accumulator.airport

    @property
    def is_writing(self) -> bool:
        return self.state is SessionState.WRITING

    @property
    def is_ignoring(self) -> bool:
        return self.state is SessionState.IGNORING

    def _new_accumulator(self) -> AirportAccumulator:
        return AirportAccumulator(airport=AirportRecord(airport_id=self.ids.airport, ident=""))

    def process(self, row: Row, context: ReaderContext) -> None:
        """
        Handle one row.

        Args:
            row: Typed row as returned by parse_fields
            context: File and line of the row
        """
        if row.kind not in _PAVEMENT_KINDS:
            self.finish_pavement(context)

        if row.kind is not RowKind.STARTUP_METADATA:
            self.finish_parking(context)

        if row.kind is RowKind.AIRPORT_HEADER:
            airport.finish_airport(self, context)
            airport.bind_airport(self, row, context)
            return

        if row.kind is RowKind.END_OF_FILE:
            self.finish(context)
            return

        binder = _BINDERS.get(row.kind)
        if binder is None or self.is_ignoring:
            return

        if not self.is_writing:
            logger.warning(f"{context.message_prefix()} {row.kind.value} row outside of an airport")

        binder(self, row, context)

    def finish(self, context: ReaderContext) -> None:
        """Write everything pending for the current airport and return to idle."""
        self.finish_pavement(context)
        self.finish_parking(context)
        airport.finish_airport(self, context)

    def finish_pavement(self, context: ReaderContext) -> None:
        if not self.is_ignoring:
            pavement.finish_pavement(self, context)

    def finish_parking(self, context: ReaderContext) -> None:
        if not self.is_ignoring:
            parking.finish_parking(self, context)

    def start_airport(self, record: AirportRecord) -> None:
        """Switch to writing with a fresh accumulator for the given airport."""
        self.accumulator = AirportAccumulator(airport=record)
        self.state = SessionState.WRITING

    def ignore_airport(self) -> None:
        """Skip all rows up to the next airport header."""
        self.state = SessionState.IGNORING

    def reset(self) -> None:
        """Drop all state of the current airport. Id counters are kept."""
        self.state = SessionState.IDLE
        self.pavement.reset()
        self.pending_parking = None
        self.accumulator = self._new_accumulator()
