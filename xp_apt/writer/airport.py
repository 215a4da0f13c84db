"""
Airport header, metadata, viewpoint and fuel rows, and the finalization
of an airport block.
"""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ..models import AirportFileRecord, AirportRecord, BoundingRect, NavPoint
from ..parsers.rows import AirportHeaderRow, MetadataRow, TruckLocationRow, ViewpointRow
from ..utils.geo import MIN_RECT_MARGIN_DEG, POS_EPSILON_100M
from ..utils.rating import calculate_rating
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

def write_airport_file(session: 'AirportSession', ident: str, context: ReaderContext) -> None:
    record = AirportFileRecord(airport_file_id=session.ids.next('airport_file'), ident=ident,
                               file_id=context.file_id)
    session.sink.write_airport_file(record)


def bind_airport(session: 'AirportSession', row: AirportHeaderRow, context: ReaderContext) -> None:
    """
    Start a new airport block.

    The airport is ignored if its ident was already read or the filter
    rejects it. The file record is written in both cases.
    """
    if session.is_writing:
        logger.warning(f"{context.message_prefix()} Invalid writing airport state in bind_airport")
    if session.is_ignoring:
        logger.warning(f"{context.message_prefix()} Invalid ignoring airport state in bind_airport")

    session.reset()
    airport_id = session.ids.next('airport')
    ident = row.ident

    write_airport_file(session, ident, context)

    if not session.airport_index.add_airport(ident, airport_id) or not session.airport_filter.is_included(ident):
        logger.debug(f"{context.message_prefix()} Ignoring airport {ident}")
        session.ignore_airport()
        return

    cleaner = session.name_cleaner
    raw_name = row.name
    session.start_airport(AirportRecord(
        airport_id=airport_id,
        ident=ident,
        file_id=context.file_id,
        name=cleaner.clean_name(raw_name),
        airport_type=row.airport_type,
        elevation_ft=row.elevation_ft,
        is_closed=cleaner.is_closed(raw_name),
        is_military=cleaner.is_military(raw_name),
        is_addon=context.is_addon,
        is_3d=context.is_3d,
        scenery_local_path=context.local_path,
        filename=context.file_name,
    ))


def bind_metadata(session: 'AirportSession', row: MetadataRow, context: ReaderContext) -> None:
    """Airport metadata: city, country, region, codes and datum."""
    airport = session.airport
    accumulator = session.accumulator
    key = row.key.lower()
    value = row.value

    if key == "city":
        airport.city = value
    elif key == "country":
        airport.country = value
    elif key.startswith("region") and value:
        airport.region = value
    elif key == "iata_code" and value:
        airport.iata_code = value
    elif key == "faa_code" and value:
        airport.faa_code = value
    elif key in ("datum_lat", "datum_lon"):
        try:
            coordinate = float(value)
        except ValueError:
            logger.warning(f"{context.message_prefix()} Invalid {key} value '{value}'")
            return

        if coordinate == 0.0:
            return

        limit = 90.0 if key == "datum_lat" else 180.0
        if not -limit <= coordinate <= limit:
            logger.warning(f"{context.message_prefix()} {key} {coordinate} out of range")
        elif key == "datum_lat":
            accumulator.datum_latitude = coordinate
        else:
            accumulator.datum_longitude = coordinate


def bind_viewpoint(session: 'AirportSession', row: ViewpointRow, context: ReaderContext) -> None:
    """Tower viewpoint."""
    airport = session.airport
    position = read_position(row.latitude, row.longitude, context, "tower")
    if position is not None:
        session.accumulator.extend_rect(position)
        airport.tower_latitude_deg = position.latitude
        airport.tower_longitude_deg = position.longitude

    airport.tower_elevation_ft = airport.elevation_ft + row.height_ft
    airport.has_tower_object = True


def bind_fuel(session: 'AirportSession', row: TruckLocationRow, context: ReaderContext) -> None:
    """Fuel trucks indicate fuel availability."""
    # Pipe separated list of baggage_loader, crew_car, fuel_liners, fuel_jets, fuel_props, ...
    truck_types = row.truck_types

    if "fuel_props" in truck_types:
        session.airport.has_avgas = True

    if "fuel_liners" in truck_types or "fuel_jets" in truck_types:
        session.airport.has_jetfuel = True


def resolve_airport_position(rect: Optional[BoundingRect],
                             datum: Optional[NavPoint],
                             longest_runway_center: Optional[NavPoint],
                             num_runways: int,
                             label: str = "") -> Tuple[Optional[BoundingRect], Optional[NavPoint]]:
    """
    Find bounding rectangle and representative position of an airport.

    Without a rectangle the datum or, if missing, the center of the
    longest runway is used for both. With a rectangle the datum is used if
    it lies no more than about 100 meters outside of it. Otherwise the
    center of the only runway or the center of the rectangle is used.
    Single point rectangles are inflated by one arc minute.

    Args:
        rect: Rectangle covering all airport features or None
        datum: Datum position from metadata or None
        longest_runway_center: Center of the longest runway or None
        num_runways: Number of runways of the airport
        label: Prefix for log messages

    Returns:
        Tuple of rectangle and position, both None if nothing is known
    """
    position = None

    if rect is None:
        logger.warning(f"{label} No bounding rectangle for airport found")
        if datum is not None:
            rect = BoundingRect.from_point(datum)
            position = datum
        elif longest_runway_center is not None:
            rect = BoundingRect.from_point(longest_runway_center)
            position = longest_runway_center
        else:
            logger.warning(f"{label} Could not determine bounding rectangle for airport")
    elif datum is not None:
        if rect.inflated(POS_EPSILON_100M, POS_EPSILON_100M).contains(datum):
            position = datum
        elif num_runways == 1 and longest_runway_center is not None:
            position = longest_runway_center
        else:
            position = rect.center

    if rect is not None:
        if rect.is_point():
            rect.inflate(MIN_RECT_MARGIN_DEG, MIN_RECT_MARGIN_DEG)
        if position is None:
            position = rect.center

    return rect, position


def finish_airport(session: 'AirportSession', context: ReaderContext) -> None:
    """
    Complete the current airport and write it together with its runway ends.

    Does nothing but reset the session if no airport is being written.
    """
    if session.is_writing:
        accumulator = session.accumulator
        airport = accumulator.airport
        label = f"{context.message_prefix()} {airport.ident}"

        airport.num_runways = airport.num_runway_hard + airport.num_runway_soft + airport.num_runway_water
        airport.rating = calculate_rating(
            is_addon=context.is_addon,
            is_3d=context.is_3d,
            has_tower=airport.has_tower_object,
            num_taxi_path=airport.num_taxi_path,
            num_parking=airport.num_parking,
            num_apron=airport.num_apron,
        )

        rect, position = resolve_airport_position(accumulator.rect, accumulator.datum,
                                                  accumulator.longest_runway_center,
                                                  airport.num_runways, label=label)
        airport.bounds = rect
        if position is not None:
            airport.latitude_deg = position.latitude
            airport.longitude_deg = position.longitude
            airport.mag_var = context.magvar.mag_var(position)

        session.sink.write_airport(airport)
        session.sink.write_runway_ends(accumulator.runway_ends)
        session.progress.increment_airport(airport.ident)

    session.reset()
