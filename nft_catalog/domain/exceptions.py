"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} with id '{entity_id}' not found")


class RecordNotFoundError(EntityNotFoundError):
    """Raised when a record is looked up by an unknown id."""

    def __init__(self, record_id: str, message: str | None = None):
        super().__init__(
            "Record",
            record_id,
            message or f"The record with id={record_id} not found",
        )


class RecordUpdateNotFoundError(RecordNotFoundError):
    """Raised when an update targets an unknown id."""

    def __init__(self, record_id: str):
        super().__init__(
            record_id,
            f"Couldn't update a record with id={record_id}. Record not found",
        )


class RecordDeleteNotFoundError(RecordNotFoundError):
    """Raised when a delete targets an unknown id."""

    def __init__(self, record_id: str):
        super().__init__(
            record_id,
            f"Couldn't delete a record with id={record_id}. Record not found",
        )


class StorageError(Exception):
    """Raised when the durable store fails to read or write.

    Not recovered locally — it surfaces to the caller as a server error.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage failure during '{operation}'{detail}")
