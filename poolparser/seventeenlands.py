"""
poolparser/seventeenlands.py
Card performance data (GIH win rates) from 17Lands, per set and archetype.
"""

import datetime
from typing import Callable, Dict, Iterable, List, Set
from pydantic import BaseModel, TypeAdapter, ValidationError
from poolparser import constants
from poolparser.exceptions import NotFoundError, TransientError
from poolparser.fetcher import Fetcher
from poolparser.logger import create_logger
from poolparser.store import KeyValueStore

logger = create_logger()


class CardPerformance(BaseModel):
    seen_count: int | None = 0
    avg_seen: float | None = 0.0
    pick_count: int | None = 0
    avg_pick: float | None = 0.0
    game_count: int | None = 0
    win_rate: float | None = 0.0
    opening_hand_game_count: int | None = 0
    opening_hand_win_rate: float | None = 0.0
    drawn_game_count: int | None = 0
    drawn_win_rate: float | None = 0.0
    ever_drawn_game_count: int | None = 0
    ever_drawn_win_rate: float | None = 0.0
    never_drawn_game_count: int | None = 0
    never_drawn_win_rate: float | None = 0.0
    drawn_improvement_win_rate: float | None = 0.0
    name: str = ""
    color: str | None = ""
    rarity: str = ""
    url: str | None = ""
    url_back: str | None = ""


CARD_PERFORMANCE_LIST = TypeAdapter(List[CardPerformance])


def get_decks(set_code: str, three_color_sets: Iterable[str]) -> List[str]:
    """The valid decks (e.g. RB, UWG) for a set"""
    decks = list(constants.DECKS_2_COLOR)
    if set_code in three_color_sets:
        decks += constants.DECKS_3_COLOR
    return decks


def get_card_prevalence_threshold(rarity: str, drawn_threshold: int) -> int:
    """Rarer cards are seen less often, so they need fewer games to count"""
    if rarity == constants.CARD_RARITY_UNCOMMON:
        return drawn_threshold // 2
    if rarity == constants.CARD_RARITY_RARE:
        return drawn_threshold // 4
    if rarity == constants.CARD_RARITY_MYTHIC:
        return drawn_threshold // 6
    return drawn_threshold


def get_gih_win_rate(card: CardPerformance, drawn_threshold: int) -> float:
    """Rarely played cards are reported as 0 instead of a small-sample win rate"""
    if (card.ever_drawn_game_count or 0) > get_card_prevalence_threshold(card.rarity, drawn_threshold):
        return card.ever_drawn_win_rate or 0.0
    return 0.0


def extract_win_rates(cards: List[CardPerformance], drawn_threshold: int) -> Dict[str, float]:
    return {card.name: get_gih_win_rate(card, drawn_threshold) for card in cards}


def parse_card_performance(payload: bytes) -> List[CardPerformance]:
    try:
        return CARD_PERFORMANCE_LIST.validate_json(payload)
    except ValidationError as error:
        logger.error(f"Malformed 17Lands payload: {error}")
        return []


def build_cache_key(set_code: str, deck_id: str, current_set: str, today: datetime.date) -> str:
    """The current set's data is refreshed daily by putting the date in the key"""
    key = f"{constants.PERFORMANCE_KEY_PREFIX}_{set_code}_{deck_id}"
    if set_code == current_set:
        key += f"_{today.year}_{today.month}_{today.day}"
    return key


def build_card_ratings_url(set_code, draft, start_date, end_date, colors) -> str:
    return constants.SEVENTEENLANDS_CARD_RATINGS_URL.format(
        set_code=set_code,
        draft=draft,
        start_date=start_date,
        end_date=end_date,
        colors=colors,
    )


class PerformanceResolver:
    def __init__(
        self,
        store: KeyValueStore,
        fetcher: Fetcher,
        current_set: str,
        performance_format: str = constants.LIMITED_TYPE_STRING_DRAFT_PREMIER,
        drawn_threshold: int = constants.SEVENTEENLANDS_DRAWN_THRESHOLD,
        start_date: str = constants.START_DATE_DEFAULT,
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self.store = store
        self.fetcher = fetcher
        self.current_set = current_set
        self.performance_format = performance_format
        self.drawn_threshold = drawn_threshold
        self.start_date = start_date
        self.today = today

    def cache_key(self, set_code: str, deck_id: str) -> str:
        return build_cache_key(set_code, deck_id, self.current_set, self.today())

    def records(self, set_code: str, deck_id: str, force_refresh: bool = False) -> List[CardPerformance]:
        """Per-card statistics from the store, or from 17Lands when missing or stale"""
        key = self.cache_key(set_code, deck_id)

        payload = self.store.get(key)
        if payload is None or not payload.strip() or force_refresh:
            payload = self._fetch(set_code, deck_id)
            self.store.set(key, payload)

        return parse_card_performance(payload)

    def resolve(self, set_code: str, deck_id: str, force_refresh: bool = False) -> Dict[str, float]:
        return extract_win_rates(
            self.records(set_code, deck_id, force_refresh), self.drawn_threshold
        )

    def _fetch(self, set_code: str, deck_id: str) -> bytes:
        logger.info(f"Fetching card performance data from 17lands.com: {set_code} {deck_id}")
        url = build_card_ratings_url(
            set_code,
            self.performance_format,
            self.start_date,
            self.today().isoformat(),
            deck_id,
        )
        try:
            return self.fetcher.fetch(url)
        except TransientError as error:
            raise NotFoundError(
                f"card performance data for {set_code} {deck_id}",
                details={"uri": error.uri},
            ) from error


def load_card_performance_data(
    resolver: PerformanceResolver,
    observed_sets: Set[str],
    set_order: Iterable[str],
    three_color_sets: Iterable[str],
    force_refresh: bool = False,
) -> Dict[str, Dict[str, float]]:
    """
    Win rates by deck, then by card name, for every set seen in the pools.

    Sets are walked in release order and each one replaces the whole map for
    a deck, so the most recent set with data for that deck wins.
    """
    three_color_sets = list(three_color_sets)
    cp_by_deck: Dict[str, Dict[str, float]] = {}

    for set_code in set_order:
        if set_code not in observed_sets:
            continue
        logger.info(f"Fetching card performance data for {set_code}")

        for deck_id in get_decks(set_code, three_color_sets):
            try:
                gih_by_card = resolver.resolve(set_code, deck_id, force_refresh)
            except NotFoundError as error:
                logger.warning(f"Skipping {set_code} {deck_id}: {error.message}")
                continue
            cp_by_deck[deck_id] = gih_by_card

    return cp_by_deck
