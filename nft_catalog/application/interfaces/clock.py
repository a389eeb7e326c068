"""Time source port."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Supplies the current time to the application layer."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
