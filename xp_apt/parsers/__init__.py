"""
Parsers for X-Plane apt.dat rows.

Lines are classified by row code and converted into typed row records;
pavement node rows are assembled into polygons.
"""

from .row_codes import AirportRowCode, RowKind, classify_row_code, parse_row_code
from .rows import (
    Row, RowFields, parse_fields, parse_line,
    IgnoredRow, EndOfFileRow, AirportHeaderRow, LandRunwayRow, LandRunwayEndFields,
    WaterRunwayRow, HelipadRow, PavementHeaderRow, PavementNodeRow, ViewpointRow,
    StartRow, StartupLocationRow, StartupMetadataRow, LightingObjectRow,
    TaxiNodeRow, TaxiEdgeRow, MetadataRow, TruckLocationRow, ComRow,
)
from .pavement import PavementAssembler

__all__ = [
    'AirportRowCode',
    'RowKind',
    'classify_row_code',
    'parse_row_code',
    'Row',
    'RowFields',
    'parse_fields',
    'parse_line',
    'IgnoredRow',
    'EndOfFileRow',
    'AirportHeaderRow',
    'LandRunwayRow',
    'LandRunwayEndFields',
    'WaterRunwayRow',
    'HelipadRow',
    'PavementHeaderRow',
    'PavementNodeRow',
    'ViewpointRow',
    'StartRow',
    'StartupLocationRow',
    'StartupMetadataRow',
    'LightingObjectRow',
    'TaxiNodeRow',
    'TaxiEdgeRow',
    'MetadataRow',
    'TruckLocationRow',
    'ComRow',
    'PavementAssembler',
]
