"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nft_catalog.application.services import RecordService
from nft_catalog.infrastructure.clock import SystemClock
from nft_catalog.infrastructure.database.repositories import SQLAlchemyRecordStore
from nft_catalog.infrastructure.database.session import get_db_session
from nft_catalog.infrastructure.id_generator import UUID4Generator


async def get_record_service(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService with its store, clock and id generator wired up."""
    store = SQLAlchemyRecordStore(session)
    yield RecordService(store, clock=SystemClock(), id_generator=UUID4Generator())
