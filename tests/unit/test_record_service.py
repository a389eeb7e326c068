"""Unit tests for the RecordService."""

from datetime import datetime, timezone

import pytest

from nft_catalog.application.schemas import RecordCreate, RecordUpdate
from nft_catalog.application.services import RecordService
from nft_catalog.domain.exceptions import (
    RecordDeleteNotFoundError,
    RecordNotFoundError,
    RecordUpdateNotFoundError,
)
from nft_catalog.infrastructure.clock import SystemClock
from nft_catalog.infrastructure.id_generator import UUID4Generator
from tests.fakes import FakeClock, FakeRecordStore, SequentialIdGenerator


def _create(name: str = "Ape", rarity_score: float | None = None) -> RecordCreate:
    payload = {"name": name, "description": f"{name} description", "imageUrl": f"https://img/{name}.png"}
    if rarity_score is not None:
        payload["rarityScore"] = rarity_score
    return RecordCreate.model_validate(payload)


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def service(store: FakeRecordStore) -> RecordService:
    return RecordService(store, clock=FakeClock(), id_generator=SequentialIdGenerator())


@pytest.mark.asyncio
async def test_create_assigns_id_timestamp_and_default_rarity(service: RecordService):
    record = await service.create_record(_create("Ape"))

    assert record.id == "record-0001"
    assert record.name == "Ape"
    assert record.image_url == "https://img/Ape.png"
    assert record.rarity_score == 0
    assert record.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert record.updated_at is None


@pytest.mark.asyncio
async def test_create_keeps_supplied_rarity_score(service: RecordService):
    record = await service.create_record(_create("Ape", rarity_score=42.5))
    assert record.rarity_score == 42.5


@pytest.mark.asyncio
async def test_create_with_real_generator_yields_distinct_ids(store: FakeRecordStore):
    service = RecordService(store, clock=SystemClock(), id_generator=UUID4Generator())
    ids = {(await service.create_record(_create(f"n{i}"))).id for i in range(20)}

    assert len(ids) == 20
    assert all(ids)
    assert len(store.records) == 20


@pytest.mark.asyncio
async def test_create_then_get_round_trip(service: RecordService):
    created = await service.create_record(_create("Ape", rarity_score=3))
    fetched = await service.get_record(created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_get_unknown_id_raises_without_side_effects(service: RecordService, store: FakeRecordStore):
    await service.create_record(_create("Ape"))
    before = dict(store.records)

    with pytest.raises(RecordNotFoundError) as exc_info:
        await service.get_record("nonexistent-id")

    assert str(exc_info.value) == "The record with id=nonexistent-id not found"
    assert store.records == before


@pytest.mark.asyncio
async def test_list_orders_by_rarity_descending(service: RecordService):
    a = await service.create_record(_create("A", rarity_score=10))
    b = await service.create_record(_create("B", rarity_score=50))

    records = await service.list_records()

    assert [r.id for r in records] == [b.id, a.id]


@pytest.mark.asyncio
async def test_list_is_non_increasing_and_breaks_ties_by_creation(service: RecordService):
    scores = [5, 99, 0, 17, 5, 63]
    created = [await service.create_record(_create(f"n{i}", rarity_score=s)) for i, s in enumerate(scores)]

    records = await service.list_records()
    ranked = [r.rarity_score for r in records]

    assert ranked == sorted(scores, reverse=True)
    tied = [r.id for r in records if r.rarity_score == 5]
    assert tied == [created[0].id, created[4].id]


@pytest.mark.asyncio
async def test_list_empty_store(service: RecordService):
    assert await service.list_records() == []


@pytest.mark.asyncio
async def test_update_changes_only_patched_field(service: RecordService):
    original = await service.create_record(_create("D", rarity_score=7))

    updated = await service.update_record(original.id, RecordUpdate(name="X"))

    assert updated.name == "X"
    assert updated.updated_at is not None
    assert updated.updated_at >= updated.created_at
    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.description == original.description
    assert updated.image_url == original.image_url
    assert updated.rarity_score == original.rarity_score


@pytest.mark.asyncio
async def test_update_persists_merged_record(service: RecordService):
    original = await service.create_record(_create("D"))
    await service.update_record(original.id, RecordUpdate.model_validate({"rarityScore": 88}))

    fetched = await service.get_record(original.id)

    assert fetched.rarity_score == 88
    assert fetched.name == "D"


@pytest.mark.asyncio
async def test_update_ignores_identity_fields_in_patch(service: RecordService, store: FakeRecordStore):
    original = await service.create_record(_create("D"))
    patch = RecordUpdate.model_validate(
        {"id": "hijacked", "createdAt": "1999-01-01T00:00:00Z", "description": "new"}
    )

    updated = await service.update_record(original.id, patch)

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.description == "new"
    assert list(store.records) == [original.id]


@pytest.mark.asyncio
async def test_update_refreshes_updated_at_each_time(service: RecordService):
    original = await service.create_record(_create("D"))

    first = await service.update_record(original.id, RecordUpdate(name="X"))
    second = await service.update_record(original.id, RecordUpdate(name="Y"))

    assert second.updated_at > first.updated_at


@pytest.mark.asyncio
async def test_update_unknown_id_raises(service: RecordService, store: FakeRecordStore):
    with pytest.raises(RecordUpdateNotFoundError) as exc_info:
        await service.update_record("missing", RecordUpdate(name="X"))

    assert str(exc_info.value) == "Couldn't update a record with id=missing. Record not found"
    assert store.records == {}


@pytest.mark.asyncio
async def test_delete_returns_removed_record(service: RecordService):
    created = await service.create_record(_create("C"))

    removed = await service.delete_record(created.id)

    assert removed == created
    with pytest.raises(RecordNotFoundError):
        await service.get_record(created.id)


@pytest.mark.asyncio
async def test_delete_twice_raises_not_found_after_first(service: RecordService):
    created = await service.create_record(_create("C"))
    await service.delete_record(created.id)

    for _ in range(2):
        with pytest.raises(RecordDeleteNotFoundError) as exc_info:
            await service.delete_record(created.id)
        assert str(exc_info.value) == f"Couldn't delete a record with id={created.id}. Record not found"


@pytest.mark.asyncio
async def test_update_with_explicit_nulls_keeps_stored_values(service: RecordService):
    original = await service.create_record(_create("D", rarity_score=9))
    patch = RecordUpdate.model_validate(
        {"name": None, "description": None, "imageUrl": None, "rarityScore": 4}
    )

    updated = await service.update_record(original.id, patch)

    assert updated.name == original.name
    assert updated.description == original.description
    assert updated.image_url == original.image_url
    assert updated.rarity_score == 4
