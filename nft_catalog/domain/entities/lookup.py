"""Explicit two-variant result for keyed store lookups."""

from dataclasses import dataclass

from .record import Record


@dataclass(frozen=True)
class Found:
    """The key was present; carries the stored record."""

    record: Record


@dataclass(frozen=True)
class Absent:
    """The key was not present."""


Lookup = Found | Absent
