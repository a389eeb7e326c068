"""Unit tests for the logging configuration."""

import logging

from nft_catalog.config import get_settings
from nft_catalog.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level_accepts_names_and_falls_back_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("WARNING") == logging.WARNING
    assert _parse_level("chatty") == logging.INFO


def test_setup_logging_applies_category_levels():
    setup_logging()
    settings = get_settings()

    assert logging.getLogger("sqlalchemy.engine").level == _parse_level(settings.log_level_sql)
    assert logging.getLogger("uvicorn.access").level == _parse_level(settings.log_level_uvicorn)
    assert logging.getLogger().handlers
