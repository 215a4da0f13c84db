from .aptdat import AptDatSource, AptDatLoader, split_rows

__all__ = [
    'AptDatSource',
    'AptDatLoader',
    'split_rows',
]
