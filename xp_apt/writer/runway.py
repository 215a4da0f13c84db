import logging
from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..models import NavPoint, Runway, RunwayEnd, Start
from ..parsers.constants import (
    Surface, CENTER_LIGHT_MEDIUM, EDGE_LIGHTS, SHOULDER_SURFACES,
    approach_lights_to_db, marking_to_flags, surface_from_code, surface_to_db,
)
from ..parsers.rows import LandRunwayEndFields, LandRunwayRow, WaterRunwayRow
from ..utils.geo import meter_to_feet, opposed_course
from ..utils.runway_classifier import classify_runway_surface
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

_SURFACE_COUNTERS = {
    'hard': 'num_runway_hard',
    'soft': 'num_runway_soft',
    'water': 'num_runway_water',
}

def _apply_land_end(session: 'AirportSession', end: RunwayEnd, fields: LandRunwayEndFields) -> None:
    """Lights and thresholds of a land runway end."""
    end.offset_threshold_ft = meter_to_feet(fields.displaced_threshold_m)
    end.blast_pad_ft = meter_to_feet(fields.blast_pad_m)

    als = approach_lights_to_db(fields.approach_lights)
    if als is not None:
        session.airport.num_runway_end_als += 1
    end.app_light_system_type = als
    end.has_reils = fields.reil > 0
    end.has_touchdown_lights = fields.touchdown_lights > 0


def _coordinates(position: Optional[NavPoint]) -> Tuple[Optional[float], Optional[float]]:
    if position is None:
        return None, None
    return position.latitude, position.longitude


def bind_runway(session: 'AirportSession', row: Union[LandRunwayRow, WaterRunwayRow],
                context: ReaderContext) -> None:
    """
    Write a land or water runway with its start positions.

    The runway ends are kept by the session until the airport is finished
    since lighting object rows may still add VASI information. An end
    with an invalid position is written without coordinates, length and
    heading are then left at 0.
    """
    airport = session.airport
    accumulator = session.accumulator

    if isinstance(row, LandRunwayRow):
        primary_name = row.primary.number
        secondary_name = row.secondary.number
        primary_pos = read_position(row.primary.latitude, row.primary.longitude, context, f"runway end {primary_name}")
        secondary_pos = read_position(row.secondary.latitude, row.secondary.longitude, context,
                                      f"runway end {secondary_name}")
        width_m = row.width_m
        surface = surface_from_code(row.surface)
    elif isinstance(row, WaterRunwayRow):
        primary_name = row.primary_number
        secondary_name = row.secondary_number
        primary_pos = read_position(row.primary_latitude, row.primary_longitude, context,
                                    f"runway end {primary_name}")
        secondary_pos = read_position(row.secondary_latitude, row.secondary_longitude, context,
                                      f"runway end {secondary_name}")
        width_m = row.width_m
        surface = Surface.WATER
    else:
        logger.warning(f"{context.message_prefix()} Invalid runway row code {row.row_code}")
        primary_name = secondary_name = ""
        primary_pos = secondary_pos = None
        width_m = 0.0
        surface = Surface.UNKNOWN

    primary_end_id = session.ids.next('runway_end')
    secondary_end_id = session.ids.next('runway_end')
    session.airport_index.add_runway_end(airport.ident, primary_name, primary_end_id)
    session.airport_index.add_runway_end(airport.ident, secondary_name, secondary_end_id)

    if primary_pos is not None and secondary_pos is not None:
        length_meter = primary_pos.distance_meters(secondary_pos)
        primary_heading = primary_pos.bearing_to(secondary_pos)
        center = primary_pos.interpolate(secondary_pos, 0.5, length_meter)
    else:
        length_meter = 0.0
        primary_heading = 0.0
        center = primary_pos or secondary_pos
    length_ft = meter_to_feet(length_meter)
    width_ft = meter_to_feet(width_m)
    secondary_heading = opposed_course(primary_heading)

    accumulator.extend_rect(primary_pos)
    accumulator.extend_rect(secondary_pos)

    category = classify_runway_surface(surface)
    if category is not None:
        counter = _SURFACE_COUNTERS[category]
        setattr(airport, counter, getattr(airport, counter) + 1)

    surface_str = surface_to_db(surface)
    if length_ft > airport.longest_runway_length_ft:
        airport.longest_runway_length_ft = length_ft
        airport.longest_runway_width_ft = width_ft
        airport.longest_runway_heading_degT = primary_heading
        airport.longest_runway_surface = surface_str
        accumulator.longest_runway_center = center

    primary_lat, primary_lon = _coordinates(primary_pos)
    secondary_lat, secondary_lon = _coordinates(secondary_pos)
    center_lat, center_lon = _coordinates(center)

    runway = Runway(
        runway_id=session.ids.next('runway'),
        airport_id=airport.airport_id,
        primary_end_id=primary_end_id,
        secondary_end_id=secondary_end_id,
        surface=surface_str,
        length_ft=length_ft,
        width_ft=width_ft,
        heading_degT=primary_heading,
        elevation_ft=airport.elevation_ft,
        primary_latitude_deg=primary_lat,
        primary_longitude_deg=primary_lon,
        secondary_latitude_deg=secondary_lat,
        secondary_longitude_deg=secondary_lon,
        latitude_deg=center_lat,
        longitude_deg=center_lon,
    )

    primary_end = RunwayEnd(
        runway_end_id=primary_end_id,
        airport_id=airport.airport_id,
        name=primary_name,
        end_type="P",
        heading_degT=primary_heading,
        latitude_deg=primary_lat,
        longitude_deg=primary_lon,
        has_closed_markings=airport.is_closed,
    )
    secondary_end = RunwayEnd(
        runway_end_id=secondary_end_id,
        airport_id=airport.airport_id,
        name=secondary_name,
        end_type="S",
        heading_degT=secondary_heading,
        latitude_deg=secondary_lat,
        longitude_deg=secondary_lon,
        has_closed_markings=airport.is_closed,
    )

    if isinstance(row, LandRunwayRow):
        shoulder = SHOULDER_SURFACES.get(row.shoulder)
        runway.shoulder = surface_to_db(shoulder) if shoulder is not None else None
        runway.marking_flags = int(marking_to_flags(row.primary.markings) | marking_to_flags(row.secondary.markings))

        if row.edge_lights in EDGE_LIGHTS:
            runway.edge_light = EDGE_LIGHTS[row.edge_lights]
        else:
            logger.warning(f"{context.message_prefix()} Invalid edge light value {row.edge_lights}")
        runway.center_light = CENTER_LIGHT_MEDIUM if row.center_lights == 1 else None

        if row.edge_lights > 0 or row.center_lights > 0:
            airport.num_runway_light += 1

        _apply_land_end(session, primary_end, row.primary)
        _apply_land_end(session, secondary_end, row.secondary)

    accumulator.runway_ends.append(primary_end)
    accumulator.runway_ends.append(secondary_end)
    session.sink.write_runway(runway)

    for end in (primary_end, secondary_end):
        airport.num_starts += 1
        session.sink.write_start(Start(
            start_id=session.ids.next('start'),
            airport_id=airport.airport_id,
            type="R",
            runway_end_id=end.runway_end_id,
            runway_name=end.name,
            heading_degT=end.heading_degT,
            elevation_ft=airport.elevation_ft,
            latitude_deg=end.latitude_deg,
            longitude_deg=end.longitude_deg,
        ))
