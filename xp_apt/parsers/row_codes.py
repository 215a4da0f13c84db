"""
Row codes of the X-Plane apt.dat format and their semantic kinds.

The first field of every line is an integer row code. classify_row_code
maps it to a RowKind which selects the binder handling the line. Codes
that are not used map to RowKind.IGNORED.
"""

from enum import Enum, IntEnum
from typing import Dict

class AirportRowCode(IntEnum):
    """Row codes used in apt.dat files."""

    NO_ROWCODE = 0

    LAND_AIRPORT_HEADER = 1
    SEAPLANE_BASE_HEADER = 16
    HELIPORT_HEADER = 17

    LAND_RUNWAY = 100
    WATER_RUNWAY = 101
    HELIPAD = 102

    PAVEMENT_HEADER = 110
    LINEAR_FEATURE_HEADER = 120
    AIRPORT_BOUNDARY_HEADER = 130

    NODE = 111
    NODE_AND_CONTROL_POINT = 112
    NODE_CLOSE = 113
    NODE_AND_CONTROL_POINT_CLOSE = 114
    NODE_TERMINATING_A_STRING = 115
    NODE_WITH_BEZIER_CONTROL_POINT_NO_CLOSE = 116

    AIRPORT_VIEWPOINT = 14
    AEROPLANE_STARTUP_LOCATION = 15
    AIRPORT_LIGHT_BEACON = 18
    WINDSOCK = 19
    TAXIWAY_SIGN = 20
    LIGHTING_OBJECT = 21

    AIRPORT_TRAFFIC_FLOW = 1000
    TRAFFIC_FLOW_WIND_RULE = 1001
    TRAFFIC_FLOW_MINIMUM_CEILING_RULE = 1002
    TRAFFIC_FLOW_MINIMUM_VISIBILITY_RULE = 1003
    TRAFFIC_FLOW_TIME_RULE = 1004
    RUNWAY_IN_USE = 1100
    VFR_TRAFFIC_PATTERN = 1101

    HEADER_INDICATING_THAT_TAXI_ROUTE_NETWORK_DATA_FOLLOWS = 1200
    TAXI_ROUTE_NETWORK_NODE = 1201
    TAXI_ROUTE_NETWORK_EDGE = 1202
    TAXI_ROUTE_EDGE_ACTIVE_ZONE = 1204

    STARTUP_LOCATION = 1300
    RAMP_START_METADATA = 1301
    METADATA_RECORDS = 1302

    TRUCK_PARKING_LOCATION = 1400
    TRUCK_DESTINATION_LOCATION = 1401

    COM_WEATHER = 50
    COM_UNICOM = 51
    COM_CLEARANCE = 52
    COM_GROUND = 53
    COM_TOWER = 54
    COM_APPROACH = 55
    COM_DEPARTURE = 56

    # 8.33 kHz frequencies given in kHz
    COM_WEATHER_833 = 1050
    COM_UNICOM_833 = 1051
    COM_CLEARANCE_833 = 1052
    COM_GROUND_833 = 1053
    COM_TOWER_833 = 1054
    COM_APPROACH_833 = 1055
    COM_DEPARTURE_833 = 1056

    END_OF_FILE = 99


class RowKind(Enum):
    """Semantic record kind of a row."""

    AIRPORT_HEADER = "airport_header"
    LAND_RUNWAY = "land_runway"
    WATER_RUNWAY = "water_runway"
    HELIPAD = "helipad"
    PAVEMENT_HEADER = "pavement_header"
    PAVEMENT_NODE = "pavement_node"
    VIEWPOINT = "viewpoint"
    START = "start"
    STARTUP_LOCATION = "startup_location"
    STARTUP_METADATA = "startup_metadata"
    LIGHTING_OBJECT = "lighting_object"
    TAXI_NODE = "taxi_node"
    TAXI_EDGE = "taxi_edge"
    METADATA = "metadata"
    TRUCK_LOCATION = "truck_location"
    COM = "com"
    END_OF_FILE = "end_of_file"
    IGNORED = "ignored"


_ROW_KINDS: Dict[int, RowKind] = {
    AirportRowCode.LAND_AIRPORT_HEADER: RowKind.AIRPORT_HEADER,
    AirportRowCode.SEAPLANE_BASE_HEADER: RowKind.AIRPORT_HEADER,
    AirportRowCode.HELIPORT_HEADER: RowKind.AIRPORT_HEADER,
    AirportRowCode.LAND_RUNWAY: RowKind.LAND_RUNWAY,
    AirportRowCode.WATER_RUNWAY: RowKind.WATER_RUNWAY,
    AirportRowCode.HELIPAD: RowKind.HELIPAD,
    AirportRowCode.PAVEMENT_HEADER: RowKind.PAVEMENT_HEADER,
    AirportRowCode.NODE: RowKind.PAVEMENT_NODE,
    AirportRowCode.NODE_AND_CONTROL_POINT: RowKind.PAVEMENT_NODE,
    AirportRowCode.NODE_CLOSE: RowKind.PAVEMENT_NODE,
    AirportRowCode.NODE_AND_CONTROL_POINT_CLOSE: RowKind.PAVEMENT_NODE,
    AirportRowCode.AIRPORT_VIEWPOINT: RowKind.VIEWPOINT,
    AirportRowCode.AEROPLANE_STARTUP_LOCATION: RowKind.START,
    AirportRowCode.LIGHTING_OBJECT: RowKind.LIGHTING_OBJECT,
    AirportRowCode.STARTUP_LOCATION: RowKind.STARTUP_LOCATION,
    AirportRowCode.RAMP_START_METADATA: RowKind.STARTUP_METADATA,
    AirportRowCode.TAXI_ROUTE_NETWORK_NODE: RowKind.TAXI_NODE,
    AirportRowCode.TAXI_ROUTE_NETWORK_EDGE: RowKind.TAXI_EDGE,
    AirportRowCode.METADATA_RECORDS: RowKind.METADATA,
    AirportRowCode.TRUCK_PARKING_LOCATION: RowKind.TRUCK_LOCATION,
    AirportRowCode.TRUCK_DESTINATION_LOCATION: RowKind.TRUCK_LOCATION,
    AirportRowCode.COM_WEATHER: RowKind.COM,
    AirportRowCode.COM_UNICOM: RowKind.COM,
    AirportRowCode.COM_CLEARANCE: RowKind.COM,
    AirportRowCode.COM_GROUND: RowKind.COM,
    AirportRowCode.COM_TOWER: RowKind.COM,
    AirportRowCode.COM_APPROACH: RowKind.COM,
    AirportRowCode.COM_DEPARTURE: RowKind.COM,
    AirportRowCode.COM_WEATHER_833: RowKind.COM,
    AirportRowCode.COM_UNICOM_833: RowKind.COM,
    AirportRowCode.COM_CLEARANCE_833: RowKind.COM,
    AirportRowCode.COM_GROUND_833: RowKind.COM,
    AirportRowCode.COM_TOWER_833: RowKind.COM,
    AirportRowCode.COM_APPROACH_833: RowKind.COM,
    AirportRowCode.COM_DEPARTURE_833: RowKind.COM,
    AirportRowCode.END_OF_FILE: RowKind.END_OF_FILE,
}

CLOSING_NODE_ROW_CODES = frozenset({
    AirportRowCode.NODE_CLOSE,
    AirportRowCode.NODE_AND_CONTROL_POINT_CLOSE,
})

CONTROL_POINT_ROW_CODES = frozenset({
    AirportRowCode.NODE_AND_CONTROL_POINT,
    AirportRowCode.NODE_AND_CONTROL_POINT_CLOSE,
})


def classify_row_code(row_code: int) -> RowKind:
    """
    Map a row code to its semantic kind.

    Args:
        row_code: Integer row code from the first field of a line

    Returns:
        The RowKind, RowKind.IGNORED for unused or unknown codes
    """
    return _ROW_KINDS.get(row_code, RowKind.IGNORED)


def parse_row_code(value: str) -> int:
    """Parse the row code field, NO_ROWCODE if it is not an integer."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return AirportRowCode.NO_ROWCODE
