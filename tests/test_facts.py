import pytest
from decimal import Decimal
from poolparser import constants
from poolparser.facts import CuratedLists, add_facts, load_curated_lists, round_half_up
from poolparser.pool import DeckSlot, PlayerPool
from poolparser.scryfall import ScryfallCard
from poolparser.sealeddeck import PoolResolver
from poolparser.strength import calculate_strength
from payloads import DELVER, LIGHTNING_BOLT, PLAINS, to_payload


def card(**fields):
    return ScryfallCard.model_validate(fields)


def make_player_pool(cards, is_alive=True):
    return PlayerPool(player="Player 1", record="3 | 2", uri="", is_alive=is_alive, cards=cards)


def test_lightning_bolt_and_plains():
    pool = make_player_pool(
        [
            DeckSlot("Lightning Bolt", 1, ScryfallCard.model_validate(LIGHTNING_BOLT)),
            DeckSlot("Plains", 4, ScryfallCard.model_validate(PLAINS)),
        ]
    )
    strength = calculate_strength(pool.cards, {"WR": {"Lightning Bolt": 0.65}}, constants.DECKS_2_COLOR)

    add_facts(pool, CuratedLists(), strength)

    assert pool.facts[constants.FACT_UNIQUE_CARDS] == 1
    assert pool.facts[constants.FACT_RED] == 1
    assert pool.facts[constants.FACT_WHITE] == 0
    assert pool.facts[constants.FACT_PLAYSETS] == 0
    assert pool.facts[constants.FACT_NON_BASIC_LAND] == 0
    assert pool.facts[constants.FACT_CMC] == 1
    assert pool.facts[constants.FACT_COST_USD] == 1
    assert pool.facts[constants.FACT_STRENGTH] == 65


def test_curated_lists_count_copies():
    pool = make_player_pool(
        [
            DeckSlot("Bomb", 2, card(name="Bomb", color_identity=["B"], type_line="Creature")),
            DeckSlot("Dud", 1, card(name="Dud", color_identity=["G"], type_line="Sorcery")),
            DeckSlot("Common", 4, card(name="Common", color_identity=["W"], type_line="Instant")),
        ]
    )
    curated = CuratedLists(bombs={"Bomb"}, duds={"Dud"}, top_commons={"Common", "Other"})

    add_facts(pool, curated, 0)

    assert pool.facts[constants.FACT_BOMBS] == 2
    assert pool.facts[constants.FACT_DUDS] == 1
    assert pool.facts[constants.FACT_TOP_COMMONS] == 4
    assert pool.facts[constants.FACT_PLAYSETS] == 1
    assert pool.facts[constants.FACT_UNIQUE_CARDS] == 3


def test_colour_land_and_commander_facts():
    pool = make_player_pool(
        [
            DeckSlot("Gold", 2, card(name="Gold", color_identity=["W", "U"], type_line="Legendary Creature â€” Human")),
            DeckSlot("Dual", 1, card(name="Dual", color_identity=["W", "U"], type_line="Land")),
            DeckSlot("Relic", 3, card(name="Relic", color_identity=[], type_line="Artifact")),
            DeckSlot("Waste", 1, card(name="Waste", color_identity=[], type_line="Land")),
            DeckSlot("Command Tower", 1, card(name="Command Tower", type_line="Land")),
        ]
    )

    add_facts(pool, CuratedLists(), 0)

    assert pool.facts[constants.FACT_GOLD] == 2
    assert pool.facts[constants.FACT_WHITE] == 0
    assert pool.facts[constants.FACT_COLOURLESS] == 3
    assert pool.facts[constants.FACT_NON_BASIC_LAND] == 2
    assert pool.facts[constants.FACT_COMMANDERS] == 1
    assert pool.facts[constants.FACT_UNIQUE_CARDS] == 4


def test_missing_prices_cost_nothing():
    pool = make_player_pool(
        [
            DeckSlot("Delver", 2, ScryfallCard.model_validate(DELVER)),
            DeckSlot("Pricey", 2, card(name="Pricey", cmc=3, prices={"usd": "2.30"})),
        ]
    )

    add_facts(pool, CuratedLists(), 0)

    assert pool.facts[constants.FACT_COST_USD] == 5
    assert pool.facts[constants.FACT_CMC] == 8
    assert pool.facts[constants.FACT_BLUE] == 2


def test_cost_and_cmc_round_halves_up():
    pool = make_player_pool(
        [
            DeckSlot("Half", 5, card(name="Half", cmc=0.5, prices={"usd": "0.50"})),
        ]
    )

    add_facts(pool, CuratedLists(), 0)

    assert pool.facts[constants.FACT_COST_USD] == 3
    assert pool.facts[constants.FACT_CMC] == 3


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0.5"), 1),
        (Decimal("1.5"), 2),
        (Decimal("2.5"), 3),
        (Decimal("2.49"), 2),
        (Decimal("0"), 0),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_dead_pools_have_no_strength():
    pool = make_player_pool([DeckSlot("Opt", 1, card(name="Opt"))], is_alive=False)

    add_facts(pool, CuratedLists(), 250)

    assert pool.facts[constants.FACT_STRENGTH] == 0


def test_every_fact_is_set():
    pool = make_player_pool([])
    add_facts(pool, CuratedLists(), 0)
    assert set(pool.facts) == set(constants.FACT_SHEET_FIELDS)


def test_load_curated_lists(fetcher):
    decks = {
        "https://sealeddeck.tech/api/pools/bombs": {"deck": [{"name": "Bomb", "count": 1}]},
        "https://sealeddeck.tech/api/pools/duds": {"sideboard": [{"name": "Dud", "count": 2}]},
        "https://sealeddeck.tech/api/pools/commons": {"deck": [{"name": "Common", "count": 1}, {"name": "Common", "count": 1}]},
    }
    fetcher.fetch.side_effect = lambda uri: to_payload(decks[uri])

    curated = load_curated_lists(PoolResolver(fetcher), "bombs", "duds", "commons")

    assert curated == CuratedLists(bombs={"Bomb"}, duds={"Dud"}, top_commons={"Common"})
