from .record import Record
from .lookup import Absent, Found, Lookup

__all__ = [
    "Record",
    "Found",
    "Absent",
    "Lookup",
]
