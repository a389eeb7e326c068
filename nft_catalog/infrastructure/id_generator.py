"""Random identifier adapter."""

from uuid import uuid4

from nft_catalog.application.interfaces import IdGenerator


class UUID4Generator(IdGenerator):
    """Generates 128-bit random identifiers rendered as canonical UUID text."""

    def new_id(self) -> str:
        return str(uuid4())
