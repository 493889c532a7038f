"""
poolparser/strength.py
Deck strength for a pool, built from per-archetype GIH win rates.

For each colour combination (deck):
    Pick the top X GIH WR cards and sum their win rates
Take the top 3 decks and weight them (100% of 1st, 80% of 2nd, 40% of 3rd)
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List
from poolparser.constants import DECK_STRENGTH_CARDS_TO_CONSIDER, DECK_STRENGTH_WEIGHTS
from poolparser.pool import DeckSlot


@dataclass
class CardStrength:
    card_name: str
    strength: float


def expand_card_strengths(cards: Iterable[DeckSlot], strength_map: Dict[str, float]) -> List[CardStrength]:
    """One entry per copy, unknown cards are worth 0"""
    return [
        CardStrength(slot.card_name, strength_map.get(slot.card_name, 0.0))
        for slot in cards
        for _ in range(slot.amount)
    ]


def calculate_deck_strength(
    cards: Iterable[DeckSlot],
    strength_map: Dict[str, float],
    cards_to_consider: int = DECK_STRENGTH_CARDS_TO_CONSIDER,
) -> float:
    card_strengths = sorted(
        expand_card_strengths(cards, strength_map),
        key=lambda cs: cs.strength,
        reverse=True,
    )
    return sum(cs.strength for cs in card_strengths[:cards_to_consider])


def calculate_deck_strengths(
    cards: List[DeckSlot],
    card_strength_by_deck: Dict[str, Dict[str, float]],
    deck_ids: Iterable[str],
    cards_to_consider: int = DECK_STRENGTH_CARDS_TO_CONSIDER,
) -> Dict[str, float]:
    return {
        deck_id: calculate_deck_strength(
            cards, card_strength_by_deck.get(deck_id, {}), cards_to_consider
        )
        for deck_id in deck_ids
    }


def combine_deck_strengths(deck_strengths: Iterable[float]) -> int:
    """Weighted sum of the three best decks; missing decks count as 0"""
    best = sorted(deck_strengths, reverse=True)[: len(DECK_STRENGTH_WEIGHTS)]
    best += [0.0] * (len(DECK_STRENGTH_WEIGHTS) - len(best))
    total = sum(weight * value for weight, value in zip(DECK_STRENGTH_WEIGHTS, best))
    return int(round(total * 100.0))


def calculate_strength(
    cards: List[DeckSlot],
    card_strength_by_deck: Dict[str, Dict[str, float]],
    deck_ids: Iterable[str],
    cards_to_consider: int = DECK_STRENGTH_CARDS_TO_CONSIDER,
) -> int:
    deck_strengths = calculate_deck_strengths(
        cards, card_strength_by_deck, deck_ids, cards_to_consider
    )
    return combine_deck_strengths(deck_strengths.values())
