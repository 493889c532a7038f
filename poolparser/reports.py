"""
poolparser/reports.py
Tab-delimited card listings and comma-delimited fact sheets for the league.
"""

import csv
import datetime
import os
from typing import Dict, List
from poolparser import constants
from poolparser.pool import DeckSlot, PlayerPool, merge_deck_slots
from poolparser.seventeenlands import CardPerformance, get_gih_win_rate
from poolparser.logger import create_logger

logger = create_logger()


def timestamp_string(now: datetime.datetime) -> str:
    return f"{now.year}_{now.month}_{now.day}_{now.hour}_{now.minute}"


def merge_pool_cards(pools: List[PlayerPool]) -> Dict[str, DeckSlot]:
    """A master list of all of the cards across a set of pools"""
    all_cards: Dict[str, DeckSlot] = {}
    for pool in pools:
        merge_deck_slots(all_cards, pool.cards)
    return all_cards


def card_listing_row(slot: DeckSlot) -> List[str]:
    card = slot.card
    if card is None:
        return [slot.card_name, "", "", "", "", "", str(slot.amount)]
    return [
        card.name,
        card.set_code,
        card.rarity,
        card.get_mana_cost(),
        card.get_type_line_clean(),
        card.prices.usd or "",
        str(slot.amount),
    ]


def write_card_listing(output_folder: str, pools: List[PlayerPool], pool_type: str, now: datetime.datetime) -> str:
    os.makedirs(output_folder, exist_ok=True)
    file_location = os.path.join(
        output_folder,
        f"{constants.REPORT_PREFIX}_{timestamp_string(now)}_{pool_type}.txt",
    )
    with open(file_location, "w", encoding="utf-8", newline="") as output:
        writer = csv.writer(output, delimiter="\t", lineterminator="\n")
        writer.writerow(constants.CARD_LISTING_HEADER)
        for slot in merge_pool_cards(pools).values():
            writer.writerow(card_listing_row(slot))
    logger.info(f"Wrote {pool_type} card listing to {file_location}")
    return file_location


def fact_sheet_row(pool: PlayerPool) -> List[str]:
    row = [pool.player, pool.team, str(pool.is_alive).lower(), pool.record]
    row += [str(pool.facts.get(fact, 0)) for fact in constants.FACT_SHEET_FIELDS]
    return row


def write_fact_sheet(output_folder: str, pools: List[PlayerPool], now: datetime.datetime) -> str:
    os.makedirs(output_folder, exist_ok=True)
    file_location = os.path.join(
        output_folder,
        f"{constants.REPORT_PREFIX}_{timestamp_string(now)}_funfacts.csv",
    )
    with open(file_location, "w", encoding="utf-8", newline="") as output:
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(constants.FACT_SHEET_HEADER)
        for pool in pools:
            writer.writerow(fact_sheet_row(pool))
    logger.info(f"Wrote fun facts to {file_location}")
    return file_location


def performance_colour(color: str) -> str:
    """17Lands lists multi-coloured cards as WUG etc, and colourless as an empty string"""
    if not color:
        return constants.PERFORMANCE_COLOUR_COLOURLESS
    if len(color) == 1:
        return color
    return constants.PERFORMANCE_COLOUR_GOLD


def performance_dump_row(card: CardPerformance, deck_id: str, drawn_threshold: int) -> List[str]:
    return [
        card.name.replace(",", " "),
        card.url or "",
        card.rarity,
        performance_colour(card.color or ""),
        deck_id,
        f"{get_gih_win_rate(card, drawn_threshold) * 100:.1f}",
    ]


def write_performance_dump(
    output_folder: str,
    set_code: str,
    records_by_deck: Dict[str, List[CardPerformance]],
    drawn_threshold: int,
    now: datetime.datetime,
) -> str:
    os.makedirs(output_folder, exist_ok=True)
    file_location = os.path.join(output_folder, f"{set_code}_{timestamp_string(now)}.csv")
    with open(file_location, "w", encoding="utf-8", newline="") as output:
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(constants.PERFORMANCE_DUMP_HEADER)
        for deck_id, records in records_by_deck.items():
            for card in records:
                writer.writerow(performance_dump_row(card, deck_id, drawn_threshold))
    logger.info(f"Wrote {set_code} performance data to {file_location}")
    return file_location
