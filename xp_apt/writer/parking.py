"""
Parking stands from startup location (1300), start location (15) and
startup metadata (1301) rows.

A stand opened by a startup location row stays pending until the next
row arrives so that a following metadata row can amend it. Start
location rows have no metadata and are written immediately.

Parking type codes:
- G gate, GS/GM/GH gate small, medium and heavy
- RGA ramp GA, RGAS/RGAM/RGAL ramp GA small, medium and large
- RC ramp cargo, RM ramp military, RMC/RMCB ramp military cargo and combat
- H hangar, T tie down, FUEL fuel station, empty if unknown
"""

import logging
from typing import TYPE_CHECKING, Dict, Tuple

from ..models import Parking
from ..parsers.rows import StartRow, StartupLocationRow, StartupMetadataRow
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 50.0

FUEL_TYPE = "FUEL"

LOCATION_TYPES: Dict[str, str] = {
    "gate": "G",
    "hangar": "H",
    "tie-down": "T",
}

OPERATION_TYPES: Dict[str, str] = {
    "general_aviation": "RGA",
    "cargo": "RC",
    "military": "RM",
}

# ICAO aircraft width code to radius in meters and size letter
WIDTH_CODES: Dict[str, Tuple[float, str]] = {
    "A": (25.0, "S"),
    "B": (40.0, "S"),
    "C": (60.0, "M"),
    "D": (80.0, "M"),
    "E": (100.0, "H"),
    "F": (130.0, "H"),
}
DEFAULT_WIDTH = (10.0, "S")

# Types which get the size letter appended
SIZED_TYPES = ("G", "RGA")

def width_code_to_size(width_code: str) -> Tuple[float, str]:
    """Radius and size letter for an ICAO width code, (10, "S") if unknown."""
    return WIDTH_CODES.get(width_code, DEFAULT_WIDTH)


def _compare_ranked(code1: str, code2: str, highest: str, lowest: str) -> int:
    if code1 != code2:
        if code1 == highest:
            return 1
        if code2 == highest:
            return -1
        if code1 == lowest:
            return -1
        if code2 == lowest:
            return 1
    return 0


def compare_gate(gate1: str, gate2: str) -> int:
    """
    Compare gate codes by size.

    Returns:
        1 if gate1 is larger, -1 if smaller, 0 if equal or not comparable
    """
    return _compare_ranked(gate1, gate2, "GH", "GS")


def compare_ramp(ramp1: str, ramp2: str) -> int:
    """Compare GA ramp codes by size, like compare_gate."""
    return _compare_ranked(ramp1, ramp2, "RGAL", "RGAS")


def fuel_flags_from_name(name: str) -> Tuple[bool, bool]:
    """
    Fuel availability from a stand name.

    Returns:
        Tuple of avgas and jet fuel flags
    """
    lower = name.lower()
    avgas = "avgas" in lower or "mogas" in lower or "gas-station" in lower
    jetfuel = "jetfuel" in lower

    if "fuel" in lower:
        avgas = jetfuel = True
    return avgas, jetfuel


def _open_parking(session: 'AirportSession', context: ReaderContext, latitude: float, longitude: float,
                  heading: float, name: str, location_type: str) -> Parking:
    airport = session.airport
    position = read_position(latitude, longitude, context, f"parking '{name}'")
    session.accumulator.extend_rect(position)

    has_avgas, has_jetfuel = fuel_flags_from_name(name)
    airport.has_avgas = airport.has_avgas or has_avgas
    airport.has_jetfuel = airport.has_jetfuel or has_jetfuel

    if has_avgas or has_jetfuel:
        parking_type = FUEL_TYPE
    else:
        parking_type = LOCATION_TYPES.get(location_type, "")

    return Parking(
        parking_id=session.ids.next('parking'),
        airport_id=airport.airport_id,
        type=parking_type,
        name=name,
        radius=DEFAULT_RADIUS,
        heading_degT=heading,
        has_avgas=has_avgas,
        has_jetfuel=has_jetfuel,
        latitude_deg=position.latitude if position else None,
        longitude_deg=position.longitude if position else None,
    )


def bind_startup_location(session: 'AirportSession', row: StartupLocationRow, context: ReaderContext) -> None:
    """Open a stand which stays pending for a following metadata row."""
    session.finish_parking(context)
    session.pending_parking = _open_parking(session, context, row.latitude, row.longitude, row.heading,
                                            row.name, row.location_type)


def bind_start(session: 'AirportSession', row: StartRow, context: ReaderContext) -> None:
    """Write a stand from a start location row."""
    session.finish_parking(context)
    session.pending_parking = _open_parking(session, context, row.latitude, row.longitude, row.heading, row.name, "")
    session.finish_parking(context)


def bind_startup_metadata(session: 'AirportSession', row: StartupMetadataRow, context: ReaderContext) -> None:
    """Amend the pending stand with operation type, airlines and size."""
    parking = session.pending_parking
    if parking is None:
        logger.warning(f"{context.message_prefix()} Startup metadata without startup location")
        return

    is_fuel = parking.is_fuel
    if not is_fuel and row.operation_type in OPERATION_TYPES:
        parking.type = OPERATION_TYPES[row.operation_type]

    if row.airline_codes is not None:
        parking.airline_codes = row.airline_codes.upper()

    radius, size = width_code_to_size(row.width_code)
    parking.radius = radius

    if not is_fuel and parking.type in SIZED_TYPES:
        parking.type += size


def finish_parking(session: 'AirportSession', context: ReaderContext) -> None:
    """Write the pending stand and update the airport parking counters."""
    parking = session.pending_parking
    if parking is None:
        return
    session.pending_parking = None

    airport = session.airport
    parking_type = parking.type
    airport.num_parking += 1

    if parking_type.startswith("G"):
        airport.num_parking_gate += 1
        if airport.largest_parking_gate is None or compare_gate(parking_type, airport.largest_parking_gate) > 0:
            airport.largest_parking_gate = parking_type

    if parking_type.startswith("RGA"):
        airport.num_parking_ga_ramp += 1
        if airport.largest_parking_ramp is None or compare_ramp(parking_type, airport.largest_parking_ramp) > 0:
            airport.largest_parking_ramp = parking_type

    if parking_type.startswith("RC"):
        airport.num_parking_cargo += 1

    if parking_type.startswith("RMC"):
        airport.num_parking_mil_cargo += 1
        airport.num_parking_mil_combat += 1

    session.sink.write_parking(parking)
