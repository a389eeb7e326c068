"""System-backed Clock adapter."""

from datetime import datetime, timezone

from nft_catalog.application.interfaces import Clock


class SystemClock(Clock):
    """Reads the host wall clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
