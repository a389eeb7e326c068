from .record_store import RecordStore
from .clock import Clock
from .id_generator import IdGenerator

__all__ = [
    "RecordStore",
    "Clock",
    "IdGenerator",
]
