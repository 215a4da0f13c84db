import logging
from typing import TYPE_CHECKING

from ..models import Apron
from ..parsers.constants import surface_from_code, surface_to_db
from ..parsers.rows import PavementHeaderRow, PavementNodeRow
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

def bind_pavement_header(session: 'AirportSession', row: PavementHeaderRow, context: ReaderContext) -> None:
    """Write any pending polygon and start a new one."""
    session.finish_pavement(context)
    session.pavement.start(row)


def bind_pavement_node(session: 'AirportSession', row: PavementNodeRow, context: ReaderContext) -> None:
    """
    Add a node to the current polygon.

    Nodes of linear features and airport boundaries are not collected but
    still extend the airport bounding rectangle. Nodes with invalid
    coordinates are still collected so that closing nodes keep the rings
    intact.
    """
    session.accumulator.extend_rect(read_position(row.latitude, row.longitude, context, "pavement node"))
    if session.pavement.active:
        session.pavement.add_node(row)


def finish_pavement(session: 'AirportSession', context: ReaderContext) -> None:
    """Write the assembled polygon as apron. Empty polygons are dropped."""
    assembler = session.pavement
    if not assembler.active:
        return

    header = assembler.header
    polygon = assembler.flush()
    if polygon is None:
        return

    for index in polygon.degenerate_holes():
        logger.warning(f"{context.message_prefix()} Pavement '{header.description}' hole {index} "
                       f"has {len(polygon.holes[index])} nodes")

    airport = session.airport
    airport.num_apron += 1
    session.sink.write_apron(Apron(
        apron_id=session.ids.next('apron'),
        airport_id=airport.airport_id,
        surface=surface_to_db(surface_from_code(header.surface)),
        geometry=polygon,
    ))
