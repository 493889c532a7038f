"""
poolparser/pool.py
In-memory state for a league player's pool.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from poolparser import constants
from poolparser.scryfall import ScryfallCard


@dataclass
class DeckSlot:
    card_name: str
    amount: int
    card: Optional[ScryfallCard] = None

    @property
    def name(self) -> str:
        return self.card.name if self.card and self.card.name else self.card_name

    @property
    def color_identity(self) -> List[str]:
        return self.card.color_identity if self.card else []

    def is_basic_land(self) -> bool:
        return self.name in constants.POOL_FILLER_LANDS

    def is_colour(self, colour: str, mono: bool = True) -> bool:
        """If mono is set, only mono-coloured cards match"""
        if mono and len(self.color_identity) > 1:
            return False
        return colour in self.color_identity

    def is_multi_colour(self) -> bool:
        return len(self.color_identity) > 1 and not self.is_card_type(constants.CARD_TYPE_LAND)

    def is_colourless(self) -> bool:
        return len(self.color_identity) == 0

    def is_card_type(self, type_phrase: str) -> bool:
        """Case sensitive match against the type line"""
        if not self.card:
            return False
        return type_phrase in self.card.get_type_line_clean()


@dataclass
class PlayerPool:
    player: str
    record: str
    uri: str
    is_alive: bool
    team: str = ""
    cards: List[DeckSlot] = field(default_factory=list)
    facts: Dict[str, int] = field(default_factory=dict)


def build_pool_uri(pool_link: str) -> str:
    """Rips the pool id from the end of a sealeddeck.tech link and builds the API call"""
    pool_id = pool_link.strip().rstrip("/").split("/")[-1]
    return constants.SEALEDDECK_POOL_URL.format(pool_id=pool_id)


def make_pool(
    player: str,
    team: str,
    pool_link: str,
    wins: int,
    losses: int,
    elimination_losses: int = constants.LEAGUE_ELIMINATION_LOSSES,
) -> PlayerPool:
    return PlayerPool(
        player=player,
        record=f"{wins} | {losses}",
        uri=build_pool_uri(pool_link),
        is_alive=losses < elimination_losses,
        team=team,
    )


def merge_deck_slots(all_cards: Dict[str, DeckSlot], cards: Iterable[DeckSlot]) -> Dict[str, DeckSlot]:
    """
    Folds cards into all_cards:
    1. A card we haven't seen gets a new entry
    2. A card we have seen adds its copies to the existing entry
    """
    for slot in cards:
        existing = all_cards.get(slot.card_name)
        if existing is not None:
            all_cards[slot.card_name] = DeckSlot(
                card_name=slot.card_name,
                amount=existing.amount + slot.amount,
                card=existing.card or slot.card,
            )
        else:
            all_cards[slot.card_name] = DeckSlot(
                card_name=slot.card_name, amount=slot.amount, card=slot.card
            )
    return all_cards
