from .record import RecordModel

__all__ = [
    "RecordModel",
]
