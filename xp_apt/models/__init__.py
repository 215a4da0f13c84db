"""
Data models for the xp_apt library.

This package contains the entity records produced while reading an
airport block (airport, runways, runway ends, facilities, aprons) and the
geometry types used to compute them.
"""

from .navpoint import NavPoint
from .rect import BoundingRect
from .airport import AirportRecord, AirportFileRecord
from .runway import Runway, RunwayEnd
from .pavement import PavementNode, PavementPolygon, Apron
from .facilities import TaxiPath, Parking, Com, Helipad, Start

__all__ = [
    # Geometry
    'NavPoint',
    'BoundingRect',
    'PavementNode',
    'PavementPolygon',
    # Entities
    'AirportRecord',
    'AirportFileRecord',
    'Runway',
    'RunwayEnd',
    'Apron',
    'TaxiPath',
    'Parking',
    'Com',
    'Helipad',
    'Start',
]
