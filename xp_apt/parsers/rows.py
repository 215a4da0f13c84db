"""
Typed row records for apt.dat lines.

Each classified row kind has its own dataclass carrying only the fields
that apply to it. Missing trailing fields read as empty strings and
numeric fields that cannot be converted read as zero, so building a row
never fails.

Typical usage:
    row = parse_line("100 30.00 1 0 0.25 0 2 1 09 47.0 -122.0 0 0 1 0 0 0 27 47.0 -121.9 0 0 1 0 0 0")
    if isinstance(row, LandRunwayRow):
        print(row.primary.number)
"""

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, List, Optional, Sequence

from .row_codes import (
    AirportRowCode, RowKind, classify_row_code, parse_row_code,
    CLOSING_NODE_ROW_CODES, CONTROL_POINT_ROW_CODES,
)

class RowFields:
    """Tolerant accessor for the whitespace separated fields of a line."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)

    def __len__(self) -> int:
        return len(self.fields)

    def text(self, index: int) -> str:
        """Field at index or empty string if the line is too short."""
        if index < len(self.fields):
            return self.fields[index]
        return ""

    def rest(self, index: int) -> str:
        """All fields from index joined by single spaces, used for names."""
        return " ".join(self.fields[index:]).strip()

    def as_int(self, index: int) -> int:
        try:
            return int(self.text(index))
        except ValueError:
            return 0

    def as_float(self, index: int) -> float:
        try:
            return float(self.text(index))
        except ValueError:
            return 0.0

    def has(self, index: int) -> bool:
        return index < len(self.fields)


@dataclass
class Row:
    row_code: int

    kind: ClassVar[RowKind] = RowKind.IGNORED


@dataclass
class IgnoredRow(Row):
    kind: ClassVar[RowKind] = RowKind.IGNORED


@dataclass
class EndOfFileRow(Row):
    kind: ClassVar[RowKind] = RowKind.END_OF_FILE


@dataclass
class AirportHeaderRow(Row):
    elevation_ft: float
    ident: str
    name: str

    kind: ClassVar[RowKind] = RowKind.AIRPORT_HEADER

    @property
    def airport_type(self) -> str:
        if self.row_code == AirportRowCode.SEAPLANE_BASE_HEADER:
            return "seaplane"
        if self.row_code == AirportRowCode.HELIPORT_HEADER:
            return "heliport"
        return "land"

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'AirportHeaderRow':
        return cls(row_code=row_code, elevation_ft=f.as_float(1), ident=f.text(4), name=f.rest(5))


@dataclass
class LandRunwayEndFields:
    number: str
    latitude: float
    longitude: float
    displaced_threshold_m: float
    blast_pad_m: float
    markings: int
    approach_lights: int
    touchdown_lights: int
    reil: int

    @classmethod
    def from_fields(cls, f: RowFields, offset: int) -> 'LandRunwayEndFields':
        return cls(
            number=f.text(offset),
            latitude=f.as_float(offset + 1),
            longitude=f.as_float(offset + 2),
            displaced_threshold_m=f.as_float(offset + 3),
            blast_pad_m=f.as_float(offset + 4),
            markings=f.as_int(offset + 5),
            approach_lights=f.as_int(offset + 6),
            touchdown_lights=f.as_int(offset + 7),
            reil=f.as_int(offset + 8),
        )


@dataclass
class LandRunwayRow(Row):
    width_m: float
    surface: int
    shoulder: int
    smoothness: float
    center_lights: int
    edge_lights: int
    distance_signs: int
    primary: LandRunwayEndFields
    secondary: LandRunwayEndFields

    kind: ClassVar[RowKind] = RowKind.LAND_RUNWAY

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'LandRunwayRow':
        return cls(
            row_code=row_code,
            width_m=f.as_float(1),
            surface=f.as_int(2),
            shoulder=f.as_int(3),
            smoothness=f.as_float(4),
            center_lights=f.as_int(5),
            edge_lights=f.as_int(6),
            distance_signs=f.as_int(7),
            primary=LandRunwayEndFields.from_fields(f, 8),
            secondary=LandRunwayEndFields.from_fields(f, 17),
        )


@dataclass
class WaterRunwayRow(Row):
    width_m: float
    buoys: int
    primary_number: str
    primary_latitude: float
    primary_longitude: float
    secondary_number: str
    secondary_latitude: float
    secondary_longitude: float

    kind: ClassVar[RowKind] = RowKind.WATER_RUNWAY

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'WaterRunwayRow':
        return cls(
            row_code=row_code,
            width_m=f.as_float(1),
            buoys=f.as_int(2),
            primary_number=f.text(3),
            primary_latitude=f.as_float(4),
            primary_longitude=f.as_float(5),
            secondary_number=f.text(6),
            secondary_latitude=f.as_float(7),
            secondary_longitude=f.as_float(8),
        )


@dataclass
class HelipadRow(Row):
    designator: str
    latitude: float
    longitude: float
    orientation: float
    length_m: float
    width_m: float
    surface: int

    kind: ClassVar[RowKind] = RowKind.HELIPAD

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'HelipadRow':
        return cls(row_code=row_code, designator=f.text(1), latitude=f.as_float(2), longitude=f.as_float(3),
                   orientation=f.as_float(4), length_m=f.as_float(5), width_m=f.as_float(6),
                   surface=f.as_int(7))


@dataclass
class PavementHeaderRow(Row):
    surface: int
    smoothness: float
    orientation: float
    description: str

    kind: ClassVar[RowKind] = RowKind.PAVEMENT_HEADER

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'PavementHeaderRow':
        return cls(row_code=row_code, surface=f.as_int(1), smoothness=f.as_float(2),
                   orientation=f.as_float(3), description=f.rest(4))


@dataclass
class PavementNodeRow(Row):
    latitude: float
    longitude: float
    control_latitude: Optional[float] = None
    control_longitude: Optional[float] = None

    kind: ClassVar[RowKind] = RowKind.PAVEMENT_NODE

    @property
    def is_closing(self) -> bool:
        return self.row_code in CLOSING_NODE_ROW_CODES

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'PavementNodeRow':
        row = cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2))
        if row_code in CONTROL_POINT_ROW_CODES:
            # Bezier cubic or quad control point
            row.control_latitude = f.as_float(3)
            row.control_longitude = f.as_float(4)
        return row


@dataclass
class ViewpointRow(Row):
    latitude: float
    longitude: float
    height_ft: float

    kind: ClassVar[RowKind] = RowKind.VIEWPOINT

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'ViewpointRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2), height_ft=f.as_float(3))


@dataclass
class StartRow(Row):
    latitude: float
    longitude: float
    heading: float
    name: str

    kind: ClassVar[RowKind] = RowKind.START

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'StartRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2),
                   heading=f.as_float(3), name=f.rest(4))


@dataclass
class StartupLocationRow(Row):
    latitude: float
    longitude: float
    heading: float
    location_type: str  # gate, hangar, misc or tie-down
    aircraft_types: str  # pipe separated list
    name: str

    kind: ClassVar[RowKind] = RowKind.STARTUP_LOCATION

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'StartupLocationRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2),
                   heading=f.as_float(3), location_type=f.text(4), aircraft_types=f.text(5),
                   name=f.rest(6))


@dataclass
class StartupMetadataRow(Row):
    width_code: str
    operation_type: str
    airline_codes: Optional[str] = None

    kind: ClassVar[RowKind] = RowKind.STARTUP_METADATA

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'StartupMetadataRow':
        return cls(row_code=row_code, width_code=f.text(1), operation_type=f.text(2),
                   airline_codes=f.rest(3) if f.has(3) else None)


@dataclass
class LightingObjectRow(Row):
    latitude: float
    longitude: float
    indicator_type: int
    orientation: float
    angle: float
    runway_name: str
    description: str

    kind: ClassVar[RowKind] = RowKind.LIGHTING_OBJECT

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'LightingObjectRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2),
                   indicator_type=f.as_int(3), orientation=f.as_float(4), angle=f.as_float(5),
                   runway_name=f.text(6), description=f.rest(7))


@dataclass
class TaxiNodeRow(Row):
    latitude: float
    longitude: float
    usage: str
    node_id: int
    name: str

    kind: ClassVar[RowKind] = RowKind.TAXI_NODE

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'TaxiNodeRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2), usage=f.text(3),
                   node_id=f.as_int(4), name=f.rest(5))


@dataclass
class TaxiEdgeRow(Row):
    start_id: int
    end_id: int
    direction: str
    edge_type: str
    name: str

    kind: ClassVar[RowKind] = RowKind.TAXI_EDGE

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'TaxiEdgeRow':
        return cls(row_code=row_code, start_id=f.as_int(1), end_id=f.as_int(2), direction=f.text(3),
                   edge_type=f.text(4), name=f.rest(5))


@dataclass
class MetadataRow(Row):
    key: str
    value: str

    kind: ClassVar[RowKind] = RowKind.METADATA

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'MetadataRow':
        return cls(row_code=row_code, key=f.text(1), value=f.rest(2))


@dataclass
class TruckLocationRow(Row):
    latitude: float
    longitude: float
    heading: float
    truck_types: str
    name: str

    kind: ClassVar[RowKind] = RowKind.TRUCK_LOCATION

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'TruckLocationRow':
        return cls(row_code=row_code, latitude=f.as_float(1), longitude=f.as_float(2),
                   heading=f.as_float(3), truck_types=f.text(4), name=f.rest(5))


@dataclass
class ComRow(Row):
    frequency: int
    name: str

    kind: ClassVar[RowKind] = RowKind.COM

    @classmethod
    def from_fields(cls, row_code: int, f: RowFields) -> 'ComRow':
        return cls(row_code=row_code, frequency=f.as_int(1), name=f.rest(2))


_ROW_PARSERS: Dict[RowKind, Callable[[int, RowFields], Row]] = {
    RowKind.AIRPORT_HEADER: AirportHeaderRow.from_fields,
    RowKind.LAND_RUNWAY: LandRunwayRow.from_fields,
    RowKind.WATER_RUNWAY: WaterRunwayRow.from_fields,
    RowKind.HELIPAD: HelipadRow.from_fields,
    RowKind.PAVEMENT_HEADER: PavementHeaderRow.from_fields,
    RowKind.PAVEMENT_NODE: PavementNodeRow.from_fields,
    RowKind.VIEWPOINT: ViewpointRow.from_fields,
    RowKind.START: StartRow.from_fields,
    RowKind.STARTUP_LOCATION: StartupLocationRow.from_fields,
    RowKind.STARTUP_METADATA: StartupMetadataRow.from_fields,
    RowKind.LIGHTING_OBJECT: LightingObjectRow.from_fields,
    RowKind.TAXI_NODE: TaxiNodeRow.from_fields,
    RowKind.TAXI_EDGE: TaxiEdgeRow.from_fields,
    RowKind.METADATA: MetadataRow.from_fields,
    RowKind.TRUCK_LOCATION: TruckLocationRow.from_fields,
    RowKind.COM: ComRow.from_fields,
}


def parse_fields(fields: Sequence[str]) -> Row:
    """
    Build the typed row for an already split line.

    Args:
        fields: Whitespace separated fields, the first being the row code

    Returns:
        Row subclass instance matching the classified kind
    """
    f = RowFields(fields)
    row_code = parse_row_code(f.text(0))
    kind = classify_row_code(row_code)

    if kind is RowKind.END_OF_FILE:
        return EndOfFileRow(row_code=row_code)

    parser = _ROW_PARSERS.get(kind)
    if parser is None:
        return IgnoredRow(row_code=row_code)
    return parser(row_code, f)


def parse_line(line: str) -> Row:
    """Split a text line and build its typed row."""
    return parse_fields(line.split())
