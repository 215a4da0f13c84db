import logging
from typing import TYPE_CHECKING, Optional

from ..models import NavPoint, TaxiPath
from ..parsers.rows import TaxiEdgeRow, TaxiNodeRow
from .context import ReaderContext, read_position

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

# Placeholder names which are not stored
GARBAGE_NAMES = frozenset({
    "*", "**", "+", "-", ".", "TAXIWAY", "TAXI_TO_RAMP", "TAXI_RAMP", "TAXY_RAMP", "UNNAMED", "TWY", "TAXI",
})

RUNWAY_EDGE_TYPE = "runway"

def clean_taxi_name(name: str) -> str:
    """Collapse whitespace and drop placeholder names."""
    name = " ".join(name.split())
    if name.upper() in GARBAGE_NAMES:
        return ""
    return name


def bind_taxi_node(session: 'AirportSession', row: TaxiNodeRow, context: ReaderContext) -> None:
    position = read_position(row.latitude, row.longitude, context, f"taxi node {row.node_id}")
    if position is not None:
        session.accumulator.taxi_nodes[row.node_id] = position


def _lookup_node(session: 'AirportSession', node_id: int, context: ReaderContext) -> Optional[NavPoint]:
    position = session.accumulator.taxi_nodes.get(node_id)
    if position is None:
        logger.warning(f"{context.message_prefix()} Taxi node {node_id} not found")
    else:
        session.accumulator.extend_rect(position)
    return position


def bind_taxi_edge(session: 'AirportSession', row: TaxiEdgeRow, context: ReaderContext) -> None:
    """Write a taxi path between two nodes. Runway edges are skipped."""
    if row.edge_type == RUNWAY_EDGE_TYPE:
        return

    airport = session.airport
    start = _lookup_node(session, row.start_id, context)
    end = _lookup_node(session, row.end_id, context)

    airport.num_taxi_path += 1
    session.sink.write_taxi_path(TaxiPath(
        taxi_path_id=session.ids.next('taxi_path'),
        airport_id=airport.airport_id,
        name=clean_taxi_name(row.name),
        start_latitude_deg=start.latitude if start else None,
        start_longitude_deg=start.longitude if start else None,
        end_latitude_deg=end.latitude if end else None,
        end_longitude_deg=end.longitude if end else None,
    ))
