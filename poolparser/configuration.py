"""
poolparser/configuration.py
Persistent user settings for a league run, stored as JSON.
"""

import json
import os
import sys
from typing import List, Tuple
from pydantic import BaseModel, Field
from poolparser import constants
from poolparser.logger import create_logger

logger = create_logger()


class Settings(BaseModel):
    database_location: str = constants.DATABASE_FOLDER_DEFAULT
    output_folder: str = constants.OUTPUT_FOLDER_DEFAULT
    performance_output_folder: str = constants.PERFORMANCE_OUTPUT_FOLDER_DEFAULT
    roster_file: str = constants.ROSTER_FILE_DEFAULT


class LeagueSettings(BaseModel):
    elimination_losses: int = constants.LEAGUE_ELIMINATION_LOSSES
    deck_strength_cards_to_consider: int = constants.DECK_STRENGTH_CARDS_TO_CONSIDER
    is_mono_set: bool = False
    header_rows: int = 0
    player_column: int = 0
    win_column: int = 2
    loss_column: int = 3
    link_column: int = 4
    team_column: int = -1
    bomb_pool_id: str = constants.BOMB_POOL_ID
    dud_pool_id: str = constants.DUD_POOL_ID
    top_common_pool_id: str = constants.TOP_COMMON_POOL_ID


class PerformanceSettings(BaseModel):
    current_set: str = constants.CURRENT_SET_DEFAULT
    performance_format: str = constants.LIMITED_TYPE_STRING_DRAFT_PREMIER
    start_date: str = constants.START_DATE_DEFAULT
    drawn_threshold: int = constants.SEVENTEENLANDS_DRAWN_THRESHOLD
    sets: List[str] = Field(
        default_factory=lambda: list(constants.SEVENTEENLANDS_SETS)
    )
    three_color_sets: List[str] = Field(
        default_factory=lambda: list(constants.SEVENTEENLANDS_3_COLOR_SETS)
    )


class Configuration(BaseModel):
    settings: Settings = Field(default_factory=Settings)
    league: LeagueSettings = Field(default_factory=LeagueSettings)
    performance: PerformanceSettings = Field(default_factory=PerformanceSettings)


def get_config_path() -> str:
    """Returns the OS-specific location of the configuration file"""
    if sys.platform == "win32":
        base_folder = os.environ.get("APPDATA", os.getcwd())
    elif sys.platform == "darwin":
        base_folder = os.path.expanduser("~/Library/Application Support")
    else:
        base_folder = os.path.expanduser("~/.config")
    return os.path.join(base_folder, constants.APPLICATION_NAME, constants.CONFIG_FILE_NAME)


def read_configuration(file_location=None) -> Tuple[Configuration, bool]:
    """Reads the configuration file, falling back to the defaults when it's missing or invalid"""
    file_location = file_location or get_config_path()
    try:
        with open(file_location, "r", encoding="utf-8") as data:
            json_data = json.loads(data.read())
        return Configuration.model_validate(json_data), True
    except FileNotFoundError:
        logger.info(f"No configuration file at {file_location}, using defaults")
    except Exception as error:
        logger.error(f"Failed to read configuration {file_location}: {error}")
    return Configuration(), False


def write_configuration(configuration: Configuration, file_location=None) -> bool:
    """Writes the configuration to disk"""
    file_location = file_location or get_config_path()
    try:
        folder = os.path.dirname(str(file_location))
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(file_location, "w", encoding="utf-8") as file:
            json.dump(configuration.model_dump(), file, indent=4)
        return True
    except Exception as error:
        logger.error(f"Failed to write configuration {file_location}: {error}")
        return False


def reset_configuration(file_location=None) -> bool:
    """Overwrites the configuration file with the defaults"""
    return write_configuration(Configuration(), file_location)
