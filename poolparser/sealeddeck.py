"""
poolparser/sealeddeck.py
Pool contents from sealeddeck.tech.
"""

from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from poolparser.fetcher import Fetcher
from poolparser.logger import create_logger
from poolparser.pool import DeckSlot, merge_deck_slots

logger = create_logger()


class SealedDeckEntry(BaseModel):
    name: str = ""
    count: int = 0


class SealedDeck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pool_id: str = Field("", alias="poolId")
    deck: List[SealedDeckEntry] = Field(default_factory=list)
    sideboard: List[SealedDeckEntry] = Field(default_factory=list)

    def flatten(self) -> Dict[str, DeckSlot]:
        """Deck and sideboard merged into one slot per card name"""
        return merge_deck_slots(
            {},
            (
                DeckSlot(card_name=entry.name, amount=entry.count)
                for entry in self.deck + self.sideboard
            ),
        )


def parse_sealed_deck(payload: bytes) -> SealedDeck:
    try:
        return SealedDeck.model_validate_json(payload)
    except ValidationError as error:
        logger.error(f"Malformed sealeddeck.tech payload: {error}")
        return SealedDeck()


class PoolResolver:
    def __init__(self, fetcher: Fetcher):
        self.fetcher = fetcher

    def fetch_deck(self, label: str, uri: str) -> SealedDeck:
        logger.info(f"Fetching pool for {label} from: {uri}")
        return parse_sealed_deck(self.fetcher.fetch(uri))

    def resolve(self, uri: str, label: str = "") -> List[DeckSlot]:
        """Flattened card list for a pool, without card metadata"""
        return list(self.fetch_deck(label or uri, uri).flatten().values())
