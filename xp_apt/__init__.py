"""
X-Plane apt.dat airport data processing library.

This package reads the airport blocks of X-Plane apt.dat scenery files
and turns them into airport, runway, facility and apron records written
to a pluggable sink.

The main public API includes:
- AptDatLoader: Reads local or downloaded apt.dat files into a sink
- AirportSession: Row by row state machine behind the loader
- MemoryStorage, DatabaseStorage: Sinks keeping records in memory or SQLite
- ReaderOptions: Filter and reader options, loadable from JSON
"""

from .config import ReaderOptions
from .exceptions import AptDatError, AptDatFormatError, StorageError
from .models import AirportRecord, NavPoint
from .sources import AptDatLoader, AptDatSource
from .storage import DatabaseStorage, MemoryStorage, SinkInterface
from .writer import AirportSession, ReaderContext

__version__ = '0.1.0'
__all__ = [
    'AptDatLoader',
    'AptDatSource',
    'AirportSession',
    'ReaderContext',
    'ReaderOptions',
    'AirportRecord',
    'NavPoint',
    'SinkInterface',
    'MemoryStorage',
    'DatabaseStorage',
    'AptDatError',
    'AptDatFormatError',
    'StorageError',
]
