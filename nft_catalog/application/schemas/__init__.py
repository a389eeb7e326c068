from .record import RecordCreate, RecordUpdate, RecordResponse

__all__ = [
    "RecordCreate",
    "RecordUpdate",
    "RecordResponse",
]
