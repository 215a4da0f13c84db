import logging
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from ..models import Com
from ..parsers.row_codes import AirportRowCode
from ..parsers.rows import ComRow
from .context import ReaderContext

if TYPE_CHECKING:
    from .session import AirportSession

logger = logging.getLogger(__name__)

# Com type and the airport frequency field it fills
COM_TYPES: Dict[int, Tuple[str, Optional[str]]] = {
    AirportRowCode.COM_UNICOM: ("UC", "unicom_frequency"),
    AirportRowCode.COM_CLEARANCE: ("C", None),
    AirportRowCode.COM_GROUND: ("G", None),
    AirportRowCode.COM_TOWER: ("T", "tower_frequency"),
    AirportRowCode.COM_APPROACH: ("A", None),
    AirportRowCode.COM_DEPARTURE: ("D", None),
}

WEATHER_TYPES = [
    ("atis", "ATIS", "atis_frequency"),
    ("awos", "AWOS", "awos_frequency"),
    ("asos", "ASOS", "asos_frequency"),
]

# 1050-1056 give the frequency in kHz, 50-56 in units of 10 kHz
_KHZ_ROW_OFFSET = AirportRowCode.COM_WEATHER_833 - AirportRowCode.COM_WEATHER

def weather_type(name: str) -> Tuple[str, str]:
    """Com type and airport field of a weather frequency, ATIS if the name does not tell."""
    lower = name.lower()
    for token, com_type, airport_field in WEATHER_TYPES:
        if token in lower:
            return com_type, airport_field
    return "ATIS", "atis_frequency"


def bind_com(session: 'AirportSession', row: ComRow, context: ReaderContext) -> None:
    """Write a com frequency and fill the matching airport frequency."""
    airport = session.airport

    row_code = row.row_code
    if row_code >= AirportRowCode.COM_WEATHER_833:
        row_code -= _KHZ_ROW_OFFSET
        frequency = row.frequency
    else:
        frequency = row.frequency * 10

    if row_code == AirportRowCode.COM_WEATHER:
        com_type, airport_field = weather_type(row.name)
    else:
        com_type, airport_field = COM_TYPES.get(row_code, ("NONE", None))

    if airport_field is not None:
        setattr(airport, airport_field, frequency)

    airport.num_com += 1
    session.sink.write_com(Com(
        com_id=session.ids.next('com'),
        airport_id=airport.airport_id,
        type=com_type,
        frequency=frequency,
        name=row.name,
    ))
