"""
Enumeration tables of the apt.dat format.

Codes read from runway, pavement and lighting rows are decoded through
the static tables below into the values written to the sink.
"""

import logging
from enum import IntEnum, IntFlag
from typing import Dict, Optional

logger = logging.getLogger(__name__)

class Surface(IntEnum):
    UNKNOWN = 0
    ASPHALT = 1
    CONCRETE = 2
    TURF_OR_GRASS = 3
    DIRT = 4
    GRAVEL = 5
    DRY_LAKEBED = 12
    WATER = 13
    SNOW_OR_ICE = 14
    TRANSPARENT = 15


SURFACE_CODES: Dict[Surface, str] = {
    Surface.UNKNOWN: "UNKNOWN",
    Surface.TRANSPARENT: "TR",
    Surface.ASPHALT: "A",
    Surface.CONCRETE: "C",
    Surface.TURF_OR_GRASS: "G",
    Surface.DRY_LAKEBED: "D",
    Surface.DIRT: "D",
    Surface.GRAVEL: "GR",
    Surface.WATER: "W",
    Surface.SNOW_OR_ICE: "SN",
}

# X-Plane 12 detailed asphalt and concrete variants
_ASPHALT_RANGE = range(20, 39)
_CONCRETE_RANGE = range(50, 58)


def surface_from_code(code: int) -> Surface:
    """
    Decode a surface code.

    Codes outside the known set return Surface.UNKNOWN with a warning.
    """
    if code in _ASPHALT_RANGE:
        return Surface.ASPHALT
    if code in _CONCRETE_RANGE:
        return Surface.CONCRETE
    try:
        return Surface(code)
    except ValueError:
        logger.warning(f"Invalid surface code {code}")
        return Surface.UNKNOWN


def surface_to_db(surface: Surface) -> str:
    return SURFACE_CODES[surface]


class MarkingFlags(IntFlag):
    NO_FLAGS = 0
    EDGES = 1 << 0
    THRESHOLD = 1 << 1
    FIXED_DISTANCE = 1 << 2
    TOUCHDOWN = 1 << 3
    DASHES = 1 << 4
    IDENT = 1 << 5
    PRECISION = 1 << 6
    EDGE_PAVEMENT = 1 << 7
    SINGLE_END = 1 << 8
    PRIMARY_CLOSED = 1 << 9
    SECONDARY_CLOSED = 1 << 10
    PRIMARY_STOL = 1 << 11
    SECONDARY_STOL = 1 << 12
    ALTERNATE_THRESHOLD = 1 << 13
    ALTERNATE_FIXEDDISTANCE = 1 << 14
    ALTERNATE_TOUCHDOWN = 1 << 15
    ALTERNATE_PRECISION = 1 << 21
    LEADING_ZERO_IDENT = 1 << 22
    NO_THRESHOLD_END_ARROWS = 1 << 23


class Marking(IntEnum):
    NO_MARKING = 0
    VISUAL = 1
    NON_PAP = 2
    PAP = 3
    UK_NON_PAP = 4
    UK_PAP = 5


_NON_PAP_FLAGS = (MarkingFlags.EDGES | MarkingFlags.THRESHOLD | MarkingFlags.FIXED_DISTANCE |
                  MarkingFlags.TOUCHDOWN | MarkingFlags.DASHES | MarkingFlags.IDENT |
                  MarkingFlags.EDGE_PAVEMENT)
_UK_NON_PAP_FLAGS = (MarkingFlags.EDGES | MarkingFlags.ALTERNATE_THRESHOLD |
                     MarkingFlags.ALTERNATE_FIXEDDISTANCE | MarkingFlags.ALTERNATE_TOUCHDOWN |
                     MarkingFlags.DASHES | MarkingFlags.IDENT | MarkingFlags.EDGE_PAVEMENT)

MARKING_FLAGS: Dict[Marking, MarkingFlags] = {
    Marking.NO_MARKING: MarkingFlags.NO_FLAGS,
    Marking.VISUAL: MarkingFlags.EDGES | MarkingFlags.DASHES | MarkingFlags.IDENT,
    Marking.NON_PAP: _NON_PAP_FLAGS,
    Marking.PAP: _NON_PAP_FLAGS | MarkingFlags.PRECISION,
    Marking.UK_NON_PAP: _UK_NON_PAP_FLAGS,
    Marking.UK_PAP: _UK_NON_PAP_FLAGS | MarkingFlags.ALTERNATE_PRECISION,
}


def marking_to_flags(code: int) -> MarkingFlags:
    """Decode a runway end marking code into marking flags."""
    try:
        return MARKING_FLAGS[Marking(code)]
    except ValueError:
        logger.warning(f"Invalid runway marking code {code}")
        return MarkingFlags.NO_FLAGS


APPROACH_LIGHTS: Dict[int, Optional[str]] = {
    0: None,
    1: "ALSF1",
    2: "ALSF2",
    3: "CALVERT",
    4: "CALVERT2",
    5: "SSALR",
    6: "SSALF",
    7: "SALS",
    8: "MALSR",
    9: "MALSF",
    10: "MALS",
    11: "ODALS",
    12: "RAIL",
}


def approach_lights_to_db(code: int) -> Optional[str]:
    """Decode an approach light system code. None if there is no system."""
    if code not in APPROACH_LIGHTS:
        logger.warning(f"Invalid approach light code {code}")
    return APPROACH_LIGHTS.get(code)


class ApproachIndicator(IntEnum):
    NO_APPR_INDICATOR = 0
    VASI = 1
    PAPI_4L = 2
    PAPI_4R = 3
    SPACE_SHUTTLE_PAPI = 4
    TRI_COLOR_VASI = 5
    RUNWAY_GUARD = 6


APPROACH_INDICATORS: Dict[ApproachIndicator, Optional[str]] = {
    ApproachIndicator.NO_APPR_INDICATOR: None,
    ApproachIndicator.VASI: "VASI22",
    ApproachIndicator.PAPI_4L: "PAPI4",
    ApproachIndicator.PAPI_4R: "PAPI4",
    ApproachIndicator.SPACE_SHUTTLE_PAPI: "PAPI4",
    ApproachIndicator.TRI_COLOR_VASI: "TRICOLOR",
    ApproachIndicator.RUNWAY_GUARD: "GUARD",
}

# Right side of a runway end is not modeled
UNKNOWN_VASI_TYPE = "UNKN"

EDGE_LIGHTS: Dict[int, Optional[str]] = {
    0: None,
    1: "L",
    2: "M",
    3: "H",
}

CENTER_LIGHT_MEDIUM = "M"

SHOULDER_SURFACES: Dict[int, Surface] = {
    1: Surface.ASPHALT,
    2: Surface.CONCRETE,
}
