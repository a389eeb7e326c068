"""Concrete RecordStore implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nft_catalog.application.interfaces import RecordStore
from nft_catalog.domain.entities import Absent, Found, Lookup, Record
from nft_catalog.domain.exceptions import StorageError
from nft_catalog.infrastructure.database.models import RecordModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port using SQLAlchemy async sessions.

    Writes are flushed into the session; the request-scoped session
    commits them (see ``get_db_session``).
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RecordModel) -> Record:
        """Map ORM model → domain entity."""
        return Record(
            id=model.id,
            name=model.name,
            description=model.description,
            image_url=model.image_url,
            rarity_score=model.rarity_score,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, record_id: str, entity: Record) -> RecordModel:
        """Map domain entity → ORM model (for insertion)."""
        return RecordModel(
            id=record_id,
            name=entity.name,
            description=entity.description,
            image_url=entity.image_url,
            rarity_score=entity.rarity_score,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def put(self, record_id: str, record: Record) -> None:
        try:
            model = await self._session.get(RecordModel, record_id)
            if model is None:
                self._session.add(self._to_model(record_id, record))
            else:
                model.name = record.name
                model.description = record.description
                model.image_url = record.image_url
                model.rarity_score = record.rarity_score
                model.created_at = record.created_at
                model.updated_at = record.updated_at
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Failed to write record %s: %s", record_id, exc)
            raise StorageError("put", exc) from exc

    async def get(self, record_id: str) -> Lookup:
        try:
            model = await self._session.get(RecordModel, record_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to read record %s: %s", record_id, exc)
            raise StorageError("get", exc) from exc
        return Found(self._to_entity(model)) if model else Absent()

    async def values(self) -> list[Record]:
        try:
            result = await self._session.execute(select(RecordModel))
        except SQLAlchemyError as exc:
            logger.error("Failed to enumerate records: %s", exc)
            raise StorageError("values", exc) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def remove(self, record_id: str) -> Lookup:
        try:
            model = await self._session.get(RecordModel, record_id)
            if model is None:
                return Absent()
            removed = self._to_entity(model)
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Failed to remove record %s: %s", record_id, exc)
            raise StorageError("remove", exc) from exc
        return Found(removed)
