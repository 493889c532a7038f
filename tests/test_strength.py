import pytest
from poolparser.pool import DeckSlot
from poolparser.strength import (
    calculate_deck_strength,
    calculate_deck_strengths,
    calculate_strength,
    combine_deck_strengths,
    expand_card_strengths,
)


def test_expand_one_entry_per_copy():
    entries = expand_card_strengths(
        [DeckSlot("Shock", 3), DeckSlot("Unknown Card", 2)], {"Shock": 0.55}
    )

    assert [e.strength for e in entries] == [0.55, 0.55, 0.55, 0.0, 0.0]


def test_deck_strength_sums_top_cards():
    cards = [DeckSlot("Good", 2), DeckSlot("Okay", 3), DeckSlot("Bad", 5)]
    strength_map = {"Good": 0.6, "Okay": 0.5, "Bad": 0.4}

    assert calculate_deck_strength(cards, strength_map, cards_to_consider=4) == pytest.approx(2.2)
    assert calculate_deck_strength(cards, strength_map) == pytest.approx(4.7)


def test_deck_strength_caps_at_sixty_cards():
    cards = [DeckSlot("Filler", 70)]
    assert calculate_deck_strength(cards, {"Filler": 0.5}) == pytest.approx(30.0)


@pytest.mark.parametrize("card_name", ["Good", "Okay", "Bad", "New Card"])
def test_adding_a_positive_card_never_lowers_strength(card_name):
    cards = [DeckSlot("Good", 30), DeckSlot("Okay", 25), DeckSlot("Bad", 10)]
    strength_map = {"Good": 0.6, "Okay": 0.5, "Bad": 0.4, "New Card": 0.45}
    before = calculate_deck_strength(cards, strength_map)

    cards.append(DeckSlot(card_name, 1))

    assert calculate_deck_strength(cards, strength_map) >= before


def test_combine_weights_top_three():
    assert combine_deck_strengths([1.0, 3.0, 2.0, 0.5]) == int(round((3.0 + 0.8 * 2.0 + 0.4 * 1.0) * 100))


def test_combine_is_order_independent():
    assert combine_deck_strengths([0.2, 0.9, 0.4]) == combine_deck_strengths([0.9, 0.4, 0.2])


@pytest.mark.parametrize(
    "strengths, expected",
    [([], 0), ([0.65], 65), ([0.65, 0.5], 105)],
)
def test_combine_with_fewer_than_three_decks(strengths, expected):
    assert combine_deck_strengths(strengths) == expected


def test_calculate_strength_single_card_pool():
    cards = [DeckSlot("Lightning Bolt", 1), DeckSlot("Plains", 4)]
    card_strength_by_deck = {"WR": {"Lightning Bolt": 0.65}, "UR": {"Lightning Bolt": 0.6}}
    deck_ids = ["WU", "WR", "UR", "BR"]

    deck_strengths = calculate_deck_strengths(cards, card_strength_by_deck, deck_ids)

    assert deck_strengths["WR"] == pytest.approx(0.65)
    assert deck_strengths["WU"] == 0.0
    assert calculate_strength(cards, card_strength_by_deck, deck_ids) == round((0.65 + 0.8 * 0.6 + 0.4 * 0.0) * 100)
