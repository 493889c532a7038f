"""
poolparser/scryfall.py
Card metadata from Scryfall, cached forever in the local store by card name.
"""

from decimal import Decimal, InvalidOperation
from typing import List, Optional
from urllib.parse import quote_plus
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from poolparser.constants import (
    ALCHEMY_PREFIX,
    SCRYFALL_CARD_URL,
    SCRYFALL_SET_CLAUSE,
    TYPE_LINE_BAD_DASH,
)
from poolparser.exceptions import NotFoundError, TransientError
from poolparser.fetcher import Fetcher
from poolparser.logger import create_logger
from poolparser.store import KeyValueStore

logger = create_logger()


class CardFace(BaseModel):
    name: str = ""
    mana_cost: Optional[str] = ""
    type_line: Optional[str] = ""
    colors: List[str] = Field(default_factory=list)


class Prices(BaseModel):
    usd: Optional[str] = None
    usd_foil: Optional[str] = None
    eur: Optional[str] = None
    tix: Optional[str] = None


class ScryfallCard(BaseModel):
    """The subset of a Scryfall card object that the reports and facts use."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    mana_cost: Optional[str] = ""
    cmc: float = 0.0
    type_line: Optional[str] = ""
    oracle_text: Optional[str] = ""
    colors: List[str] = Field(default_factory=list)
    color_identity: List[str] = Field(default_factory=list)
    card_faces: List[CardFace] = Field(default_factory=list)
    set_code: str = Field("", alias="set")
    set_name: str = ""
    rarity: str = ""
    prices: Prices = Field(default_factory=Prices)

    def get_mana_cost(self) -> str:
        """Double-faced cards bury the mana cost in the card faces"""
        if self.mana_cost:
            return self.mana_cost

        for face in self.card_faces[:2]:
            if face.mana_cost:
                return face.mana_cost

        return ""

    def get_type_line_clean(self) -> str:
        return (self.type_line or "").replace(TYPE_LINE_BAD_DASH, "-")

    @property
    def price_usd(self) -> Optional[Decimal]:
        """USD price, or None when Scryfall has no usable price for the card"""
        if not self.prices.usd:
            return None
        try:
            return Decimal(self.prices.usd)
        except InvalidOperation:
            logger.debug(f"Unparseable price '{self.prices.usd}' for {self.name}")
            return None


def normalize_card_name(card_name: str) -> str:
    """Remove the Alchemy designation from a card name"""
    card_name = card_name.strip()
    if card_name.startswith(ALCHEMY_PREFIX):
        card_name = card_name[len(ALCHEMY_PREFIX):]
    return card_name


def parse_card(payload: bytes) -> ScryfallCard:
    """Missing fields fall back to their defaults; a malformed payload gives an empty card"""
    try:
        return ScryfallCard.model_validate_json(payload)
    except ValidationError as error:
        logger.error(f"Malformed Scryfall payload: {error}")
        return ScryfallCard()


def build_card_url(card_name: str, set_code: str = "") -> str:
    url = SCRYFALL_CARD_URL.format(name=quote_plus(card_name))
    if set_code:
        url += SCRYFALL_SET_CLAUSE.format(set_code=quote_plus(set_code.lower()))
    return url


class CardResolver:
    """
    Resolves card names to Scryfall cards, checking the store before going
    to the network. A lookup scoped to the current set is tried first so the
    card details match the league's set, then an unscoped lookup.
    """

    def __init__(self, store: KeyValueStore, fetcher: Fetcher, current_set: str):
        self.store = store
        self.fetcher = fetcher
        self.current_set = current_set

    def resolve(self, card_name: str) -> ScryfallCard:
        card_name = normalize_card_name(card_name)

        payload = self.store.get(card_name)
        if payload is None:
            payload = self._fetch(card_name)
            self.store.set(card_name, payload)

        return parse_card(payload)

    def _fetch(self, card_name: str) -> bytes:
        logger.info(f"Fetching card from Scryfall: {card_name}")
        try:
            return self.fetcher.fetch(build_card_url(card_name, self.current_set))
        except TransientError as error:
            logger.info(f"{card_name} not found in {self.current_set}, trying all sets ({error.status_code})")

        try:
            return self.fetcher.fetch(build_card_url(card_name))
        except TransientError as error:
            raise NotFoundError(f"card {card_name}", details={"uri": error.uri}) from error
