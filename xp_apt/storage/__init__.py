from .base import SinkInterface
from .memory_storage import MemoryStorage
from .database_storage import DatabaseStorage

__all__ = [
    'SinkInterface',
    'MemoryStorage',
    'DatabaseStorage',
]
