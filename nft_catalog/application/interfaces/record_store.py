"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from nft_catalog.domain.entities import Lookup, Record


class RecordStore(ABC):
    """Port for durable keyed record storage — implemented in the infrastructure layer.

    The store is the single owner of truth for record existence: every
    existence check goes through ``get`` or ``remove``.
    """

    @abstractmethod
    async def put(self, record_id: str, record: Record) -> None:
        """Insert the record at ``record_id``, overwriting any existing entry."""
        ...

    @abstractmethod
    async def get(self, record_id: str) -> Lookup:
        """Return ``Found(record)`` or ``Absent()``."""
        ...

    @abstractmethod
    async def values(self) -> list[Record]:
        """Return every stored record, in no particular order."""
        ...

    @abstractmethod
    async def remove(self, record_id: str) -> Lookup:
        """Delete the entry and return ``Found(removed)``, or ``Absent()`` if missing."""
        ...
