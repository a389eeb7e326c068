"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Record:
    """Core domain entity representing a rankable catalog record (an NFT)."""

    id: str
    name: str
    description: str
    image_url: str
    created_at: datetime
    rarity_score: float = 0
    updated_at: datetime | None = None

    def update(
        self,
        *,
        updated_at: datetime,
        name: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
        rarity_score: float | None = None,
    ) -> None:
        """Overwrite the mutable fields that were given and stamp updated_at.

        ``id`` and ``created_at`` are not parameters, so a patch can never
        change them.
        """
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if rarity_score is not None:
            self.rarity_score = rarity_score
        self.updated_at = updated_at
