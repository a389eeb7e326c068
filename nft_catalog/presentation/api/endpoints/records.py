"""Record CRUD and ranking endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from nft_catalog.application.schemas import RecordCreate, RecordResponse, RecordUpdate
from nft_catalog.application.services import RecordService
from nft_catalog.domain.exceptions import (
    RecordDeleteNotFoundError,
    RecordNotFoundError,
    RecordUpdateNotFoundError,
)
from nft_catalog.infrastructure.dependencies import get_record_service

router = APIRouter(prefix="/records", tags=["Records"])


@router.post("", response_model=RecordResponse)
async def create_record(
    data: RecordCreate,
    service: RecordService = Depends(get_record_service, scope="function"),
) -> RecordResponse:
    """Create a new record with a generated id and creation timestamp."""
    record = await service.create_record(data)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.get("", response_model=list[RecordResponse])
async def list_records(
    service: RecordService = Depends(get_record_service, scope="function"),
) -> list[RecordResponse]:
    """Retrieve all records, rarest first."""
    records = await service.list_records()
    return [RecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: str,
    service: RecordService = Depends(get_record_service, scope="function"),
) -> RecordResponse:
    """Retrieve a single record by ID."""
    try:
        record = await service.get_record(record_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.put("/{record_id}", response_model=RecordResponse)
async def update_record(
    record_id: str,
    data: RecordUpdate,
    service: RecordService = Depends(get_record_service, scope="function"),
) -> RecordResponse:
    """Merge the supplied fields into an existing record."""
    try:
        record = await service.update_record(record_id, data)
    except RecordUpdateNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.delete("/{record_id}", response_model=RecordResponse)
async def delete_record(
    record_id: str,
    service: RecordService = Depends(get_record_service, scope="function"),
) -> RecordResponse:
    """Delete a record and return it as confirmation."""
    try:
        record = await service.delete_record(record_id)
    except RecordDeleteNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RecordResponse.model_validate(record, from_attributes=True)
