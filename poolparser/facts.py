"""
poolparser/facts.py
A bunch of neato stats about each pool, written to the fun facts sheet.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Set
from poolparser import constants
from poolparser.pool import PlayerPool
from poolparser.sealeddeck import PoolResolver


@dataclass
class CuratedLists:
    """Card names that the league has hand-picked for some analysis"""

    bombs: Set[str] = field(default_factory=set)
    duds: Set[str] = field(default_factory=set)
    top_commons: Set[str] = field(default_factory=set)


def load_curated_lists(pool_resolver: PoolResolver, bomb_pool_id: str, dud_pool_id: str, top_common_pool_id: str) -> CuratedLists:
    # Bombs (>= 63% WR), duds (<= 53% WR) and top commons live in sealeddeck.tech pools
    def names(label, pool_id):
        uri = constants.SEALEDDECK_POOL_URL.format(pool_id=pool_id)
        return set(pool_resolver.fetch_deck(label, uri).flatten())

    return CuratedLists(
        bombs=names("Bombs", bomb_pool_id),
        duds=names("Duds", dud_pool_id),
        top_commons=names("TopCommons", top_common_pool_id),
    )


def round_half_up(value: Decimal) -> int:
    """Rounds to a whole number with halves going away from zero"""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def add_facts(pool: PlayerPool, curated: CuratedLists, strength: int) -> None:
    facts = {fact: 0 for fact in constants.FACT_SHEET_FIELDS}
    cmc = 0.0
    cost_usd = Decimal(0)

    # Basic lands (and command towers) don't count for anything
    for slot in pool.cards:
        if slot.is_basic_land():
            continue

        # The slots are de-duplicated, so this counts names
        facts[constants.FACT_UNIQUE_CARDS] += 1

        if slot.card_name in curated.bombs:
            facts[constants.FACT_BOMBS] += slot.amount
        if slot.card_name in curated.duds:
            facts[constants.FACT_DUDS] += slot.amount
        if slot.card_name in curated.top_commons:
            facts[constants.FACT_TOP_COMMONS] += slot.amount

        for colour, fact in constants.COLOR_FACTS_DICT.items():
            if slot.is_colour(colour, mono=True):
                facts[fact] += slot.amount
        if slot.is_multi_colour():
            facts[constants.FACT_GOLD] += slot.amount

        is_land = slot.is_card_type(constants.CARD_TYPE_LAND)
        if slot.is_colourless() and not is_land:
            facts[constants.FACT_COLOURLESS] += slot.amount
        if is_land:
            facts[constants.FACT_NON_BASIC_LAND] += slot.amount

        if slot.amount >= 4:
            facts[constants.FACT_PLAYSETS] += 1

        if slot.card:
            # No price means the card costs nothing
            cost_usd += slot.amount * (slot.card.price_usd or Decimal(0))
            cmc += slot.amount * slot.card.cmc

        # Don't count multiples of a commander
        if slot.is_card_type(constants.CARD_TYPE_COMMANDER):
            facts[constants.FACT_COMMANDERS] += 1

    facts[constants.FACT_CMC] = round_half_up(Decimal(str(cmc)))
    facts[constants.FACT_COST_USD] = round_half_up(cost_usd)
    facts[constants.FACT_STRENGTH] = strength if pool.is_alive else 0

    pool.facts.update(facts)
