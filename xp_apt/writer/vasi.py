import logging
from typing import TYPE_CHECKING, Optional

from ..models import RunwayEnd
from ..parsers.constants import APPROACH_INDICATORS, UNKNOWN_VASI_TYPE, ApproachIndicator
from ..parsers.rows import LightingObjectRow
from .context import ReaderContext

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

# Largest heading difference for attaching a VASI to a runway end
MAX_HEADING_DIFF = 10.0

def find_runway_end(runway_ends, name: str, orientation: float) -> Optional[RunwayEnd]:
    """
    Find the runway end a VASI belongs to.

    Runway ends are matched by name first. If no name is given or no end
    has the name, the end with the closest heading below MAX_HEADING_DIFF
    is used. Headings are compared without wrap around at north.
    """
    if name:
        for end in runway_ends:
            if end.name == name:
                return end

    best_end = None
    best_diff = None
    for end in runway_ends:
        diff = abs(end.heading_degT - orientation)
        if diff < MAX_HEADING_DIFF and (best_diff is None or diff < best_diff):
            best_end = end
            best_diff = diff
    return best_end


def bind_vasi(session: 'AirportSession', row: LightingObjectRow, context: ReaderContext) -> None:
    """Attach a VASI or PAPI to the left side of a runway end."""
    try:
        indicator = ApproachIndicator(row.indicator_type)
    except ValueError:
        logger.warning(f"{context.message_prefix()} Invalid approach indicator type {row.indicator_type}")
        return

    if indicator in (ApproachIndicator.NO_APPR_INDICATOR, ApproachIndicator.RUNWAY_GUARD):
        return

    end = find_runway_end(session.accumulator.runway_ends, row.runway_name, row.orientation)
    if end is None:
        logger.warning(f"{context.message_prefix()} No runway end '{row.runway_name}' "
                       f"for VASI with orientation {row.orientation} found")
        return

    session.airport.num_runway_end_vasi += 1
    end.left_vasi_type = APPROACH_INDICATORS[indicator]
    end.left_vasi_pitch = row.angle
    end.right_vasi_type = UNKNOWN_VASI_TYPE
    end.right_vasi_pitch = 0.0
