"""
poolparser/pipeline.py
Runs a league analysis: fetch pools, enrich cards, score and report.
"""

import datetime
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
from poolparser import constants
from poolparser.configuration import Configuration
from poolparser.facts import CuratedLists, add_facts, load_curated_lists
from poolparser.fetcher import Fetcher
from poolparser.logger import create_logger
from poolparser.pool import DeckSlot, PlayerPool
from poolparser.reports import write_card_listing, write_fact_sheet, write_performance_dump
from poolparser.roster import read_roster
from poolparser.scryfall import CardResolver
from poolparser.sealeddeck import PoolResolver
from poolparser.seventeenlands import PerformanceResolver, get_decks, load_card_performance_data
from poolparser.store import KeyValueStore
from poolparser.strength import calculate_strength

logger = create_logger()


@dataclass
class PipelineContext:
    """Everything a run shares, created once and passed around"""

    configuration: Configuration
    card_resolver: CardResolver
    pool_resolver: PoolResolver
    performance_resolver: PerformanceResolver
    observed_sets: Set[str] = field(default_factory=set)
    curated: CuratedLists = field(default_factory=CuratedLists)
    force_refresh: bool = False

    def __post_init__(self):
        # The current set is always worth looking up
        self.observed_sets.add(self.configuration.performance.current_set)

    @classmethod
    def create(cls, configuration: Configuration, store: KeyValueStore, force_refresh: bool = False):
        performance = configuration.performance
        return cls(
            configuration=configuration,
            card_resolver=CardResolver(
                store, Fetcher(constants.SCRYFALL_PAUSE_MS), performance.current_set
            ),
            pool_resolver=PoolResolver(Fetcher(constants.SEALEDDECK_PAUSE_MS)),
            performance_resolver=PerformanceResolver(
                store,
                Fetcher(constants.SEVENTEENLANDS_PAUSE_MS),
                performance.current_set,
                performance.performance_format,
                performance.drawn_threshold,
                performance.start_date,
            ),
            force_refresh=force_refresh,
        )


def fetch_card_data(context: PipelineContext, pool: PlayerPool, slots: List[DeckSlot]) -> None:
    """Attaches card data to each slot and records the sets the cards came from"""
    for slot in slots:
        slot.card = context.card_resolver.resolve(slot.card_name)
        pool.cards.append(slot)

        if not context.configuration.league.is_mono_set and slot.card.set_code:
            context.observed_sets.add(slot.card.set_code.upper())


def populate_pools(context: PipelineContext, pools: List[PlayerPool]) -> None:
    for pool in pools:
        slots = context.pool_resolver.resolve(pool.uri, pool.player)
        fetch_card_data(context, pool, slots)


def load_fun_fact_lists(context: PipelineContext) -> None:
    league = context.configuration.league
    context.curated = load_curated_lists(
        context.pool_resolver,
        league.bomb_pool_id,
        league.dud_pool_id,
        league.top_common_pool_id,
    )


def load_performance(context: PipelineContext) -> Dict[str, Dict[str, float]]:
    performance = context.configuration.performance
    return load_card_performance_data(
        context.performance_resolver,
        context.observed_sets,
        performance.sets,
        performance.three_color_sets,
        context.force_refresh,
    )


def process_fun_facts(context: PipelineContext, pools: List[PlayerPool]) -> None:
    card_strength_by_deck = load_performance(context)
    performance = context.configuration.performance
    deck_ids = get_decks(performance.current_set, performance.three_color_sets)
    cards_to_consider = context.configuration.league.deck_strength_cards_to_consider

    for pool in pools:
        strength = calculate_strength(
            pool.cards, card_strength_by_deck, deck_ids, cards_to_consider
        )
        add_facts(pool, context.curated, strength)


def dump_performance_data(context: PipelineContext, now: datetime.datetime) -> str:
    """The day's performance data for every deck in the current set"""
    performance = context.configuration.performance
    records_by_deck = {
        deck_id: context.performance_resolver.records(
            performance.current_set, deck_id
        )
        for deck_id in get_decks(performance.current_set, performance.three_color_sets)
    }
    return write_performance_dump(
        context.configuration.settings.performance_output_folder,
        performance.current_set,
        records_by_deck,
        performance.drawn_threshold,
        now,
    )


def analyze_pools(context: PipelineContext, pools: List[PlayerPool], now: Optional[datetime.datetime] = None) -> List[str]:
    """Enriches and scores the pools, returning the report files written"""
    now = now or datetime.datetime.now()
    output_folder = context.configuration.settings.output_folder

    populate_pools(context, pools)

    alive_pools = [p for p in pools if p.is_alive]
    dead_pools = [p for p in pools if not p.is_alive]
    logger.info(f"Found {len(alive_pools)} living pools and {len(dead_pools)} dead pools")

    reports = []
    for pool_type, group in (
        (constants.POOL_TYPE_ALIVE, alive_pools),
        (constants.POOL_TYPE_DEAD, dead_pools),
    ):
        if group:
            logger.info(f"Analyzing {pool_type} pools...")
            reports.append(write_card_listing(output_folder, group, pool_type, now))

    load_fun_fact_lists(context)
    process_fun_facts(context, pools)
    reports.append(write_fact_sheet(output_folder, pools, now))
    return reports


def run(configuration: Configuration, force_refresh: bool = False, dump_performance: bool = False) -> List[str]:
    pools = read_roster(configuration.settings.roster_file, configuration.league)

    with KeyValueStore(configuration.settings.database_location) as store:
        context = PipelineContext.create(configuration, store, force_refresh)
        reports = analyze_pools(context, pools)
        if dump_performance:
            reports.append(dump_performance_data(context, datetime.datetime.now()))

    return reports
