"""
poolparser/roster.py
Reads the league roster (a CSV export of the pools sheet) into player pools.
"""

import csv
from typing import List
from poolparser.configuration import LeagueSettings
from poolparser.exceptions import RosterError
from poolparser.logger import create_logger
from poolparser.pool import PlayerPool, make_pool

logger = create_logger()


def parse_roster_row(row_number: int, row: List[str], league: LeagueSettings) -> PlayerPool:
    try:
        player = row[league.player_column].strip()
        wins = int(row[league.win_column])
        losses = int(row[league.loss_column])
        pool_link = row[league.link_column].strip()
        team = row[league.team_column].strip() if league.team_column >= 0 else ""
    except IndexError as error:
        raise RosterError(row_number, "missing column", details={"row": row}) from error
    except ValueError as error:
        raise RosterError(row_number, "wins and losses must be numbers", details={"row": row}) from error

    if not pool_link:
        raise RosterError(row_number, "missing pool link", details={"row": row})

    return make_pool(player, team, pool_link, wins, losses, league.elimination_losses)


def read_roster(file_location: str, league: LeagueSettings) -> List[PlayerPool]:
    logger.info(f"Processing roster: {file_location}")
    pools = []
    with open(file_location, "r", encoding="utf-8", newline="") as roster_file:
        for row_number, row in enumerate(csv.reader(roster_file), start=1):
            if row_number <= league.header_rows or not any(cell.strip() for cell in row):
                continue
            pools.append(parse_roster_row(row_number, row, league))

    if not pools:
        logger.warning("No data found.")
    return pools
