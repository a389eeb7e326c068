"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from nft_catalog.config import get_settings
from nft_catalog.presentation.api.endpoints.health import router as health_router
from nft_catalog.presentation.api.endpoints.records import router as records_router

router = APIRouter(prefix=get_settings().api_prefix)
router.include_router(health_router)
router.include_router(records_router)
