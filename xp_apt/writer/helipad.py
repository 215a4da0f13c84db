from typing import TYPE_CHECKING

from ..models import Helipad, Start
from ..parsers.constants import Surface, surface_from_code, surface_to_db
from ..parsers.rows import HelipadRow
from ..utils.geo import meter_to_feet
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

def bind_helipad(session: 'AirportSession', row: HelipadRow, context: ReaderContext) -> None:
    """Write a helipad and its start position, numbered per airport."""
    airport = session.airport
    accumulator = session.accumulator
    position = read_position(row.latitude, row.longitude, context, f"helipad {row.designator}")
    latitude, longitude = (position.latitude, position.longitude) if position else (None, None)

    accumulator.helipad_start_number += 1
    number = accumulator.helipad_start_number
    start = Start(
        start_id=session.ids.next('start'),
        airport_id=airport.airport_id,
        type="H",
        number=number,
        runway_name=f"{number:02d}",
        heading_degT=row.orientation,
        elevation_ft=airport.elevation_ft,
        latitude_deg=latitude,
        longitude_deg=longitude,
    )
    airport.num_starts += 1
    session.sink.write_start(start)

    surface = surface_from_code(row.surface)
    airport.num_helipad += 1
    accumulator.extend_rect(position)
    session.sink.write_helipad(Helipad(
        helipad_id=session.ids.next('helipad'),
        airport_id=airport.airport_id,
        start_id=start.start_id,
        surface=surface_to_db(surface),
        length_ft=meter_to_feet(row.length_m),
        width_ft=meter_to_feet(row.width_m),
        heading_degT=row.orientation,
        is_transparent=surface is Surface.TRANSPARENT,
        is_closed=airport.is_closed,
        elevation_ft=airport.elevation_ft,
        latitude_deg=latitude,
        longitude_deg=longitude,
    ))
