"""Identifier source port."""

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Produces new globally-unique record identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        ...
