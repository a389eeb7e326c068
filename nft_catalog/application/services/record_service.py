"""Application service (use case) for Record operations."""

import logging

from nft_catalog.application.interfaces import Clock, IdGenerator, RecordStore
from nft_catalog.application.schemas import RecordCreate, RecordUpdate
from nft_catalog.domain.entities import Absent, Found, Record
from nft_catalog.domain.exceptions import (
    RecordDeleteNotFoundError,
    RecordNotFoundError,
    RecordUpdateNotFoundError,
)

logger = logging.getLogger(__name__)


class RecordService:
    """Orchestrates record CRUD and ranking. Depends on the store, clock and id ports (DI)."""

    def __init__(self, store: RecordStore, clock: Clock, id_generator: IdGenerator):
        self._store = store
        self._clock = clock
        self._id_generator = id_generator

    async def create_record(self, data: RecordCreate) -> Record:
        # No uniqueness check: collisions of 128-bit random ids are negligible.
        record = Record(
            id=self._id_generator.new_id(),
            name=data.name,
            description=data.description,
            image_url=data.image_url,
            rarity_score=data.rarity_score,
            created_at=self._clock.now(),
        )
        await self._store.put(record.id, record)
        logger.info("Created record %s (rarity_score=%s)", record.id, record.rarity_score)
        return record

    async def list_records(self) -> list[Record]:
        """Return all records ranked by rarity, highest first.

        Equal scores fall back to creation time, then id, so the order is deterministic.
        """
        records = await self._store.values()
        return sorted(records, key=lambda r: (-r.rarity_score, r.created_at, r.id))

    async def get_record(self, record_id: str) -> Record:
        lookup = await self._store.get(record_id)
        if isinstance(lookup, Absent):
            logger.warning("Record %s not found", record_id)
            raise RecordNotFoundError(record_id)
        return lookup.record

    async def update_record(self, record_id: str, patch: RecordUpdate) -> Record:
        lookup = await self._store.get(record_id)
        if not isinstance(lookup, Found):
            logger.warning("Update of unknown record %s", record_id)
            raise RecordUpdateNotFoundError(record_id)

        record = lookup.record
        record.update(
            updated_at=self._clock.now(),
            name=patch.name,
            description=patch.description,
            image_url=patch.image_url,
            rarity_score=patch.rarity_score,
        )
        await self._store.put(record.id, record)
        logger.info(
            "Updated record %s fields=%s",
            record.id,
            sorted(patch.model_dump(exclude_none=True)),
        )
        return record

    async def delete_record(self, record_id: str) -> Record:
        lookup = await self._store.remove(record_id)
        if isinstance(lookup, Absent):
            logger.warning("Delete of unknown record %s", record_id)
            raise RecordDeleteNotFoundError(record_id)
        logger.info("Deleted record %s", record_id)
        return lookup.record
