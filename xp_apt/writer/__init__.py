"""
Airport writer: turns typed apt.dat rows into airport entities.

AirportSession sequences the rows of airport blocks and calls one binder
per row kind. Binders compute the derived values and hand finished
entities to the sink.
"""

from .context import ReaderContext
from .session import AirportSession, AirportAccumulator, IdCounters, SessionState
from .airport import resolve_airport_position
from .parking import compare_gate, compare_ramp, width_code_to_size
from .vasi import find_runway_end

__all__ = [
    'ReaderContext',
    'AirportSession',
    'AirportAccumulator',
    'IdCounters',
    'SessionState',
    'resolve_airport_position',
    'compare_gate',
    'compare_ramp',
    'width_code_to_size',
    'find_runway_end',
]
