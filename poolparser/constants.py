import os

APPLICATION_VERSION = 1.4
APPLICATION_NAME = "PoolParser"

BASIC_LANDS = ["Island", "Mountain", "Swamp", "Plains", "Forest"]
# sealeddeck.tech sometimes inserts a Command Tower into pools
POOL_FILLER_LANDS = BASIC_LANDS + ["Command Tower"]

CARD_COLOR_SYMBOL_WHITE = "W"
CARD_COLOR_SYMBOL_BLACK = "B"
CARD_COLOR_SYMBOL_BLUE = "U"
CARD_COLOR_SYMBOL_RED = "R"
CARD_COLOR_SYMBOL_GREEN = "G"

CARD_TYPE_LAND = "Land"
CARD_TYPE_COMMANDER = "Legendary Creature"

CARD_RARITY_COMMON = "common"
CARD_RARITY_UNCOMMON = "uncommon"
CARD_RARITY_RARE = "rare"
CARD_RARITY_MYTHIC = "mythic"

ALCHEMY_PREFIX = "A-"
TYPE_LINE_BAD_DASH = "â€”"

# Remote sources
SCRYFALL_CARD_URL = "https://api.scryfall.com/cards/named?exact={name}"
SCRYFALL_SET_CLAUSE = "&set={set_code}"
SEALEDDECK_POOL_URL = "https://sealeddeck.tech/api/pools/{pool_id}"
SEVENTEENLANDS_CARD_RATINGS_URL = (
    "https://www.17lands.com/card_ratings/data?expansion={set_code}"
    "&format={draft}&start_date={start_date}&end_date={end_date}&colors={colors}"
)

# Be a good citizen
SCRYFALL_PAUSE_MS = 75
SEALEDDECK_PAUSE_MS = 100
SEVENTEENLANDS_PAUSE_MS = 1000
WEB_RETRIES = 3
WEB_RETRY_MS = 500
REQUEST_TIMEOUT = 30

USER_AGENT = f"{APPLICATION_NAME}/{APPLICATION_VERSION}"
API_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json;q=0.9,*/*;q=0.8",
}

PERFORMANCE_KEY_PREFIX = "perf"
START_DATE_DEFAULT = "2019-01-01"
LIMITED_TYPE_STRING_DRAFT_PREMIER = "PremierDraft"

# 1000 is a typical base, this gets scaled down by rarity
SEVENTEENLANDS_DRAWN_THRESHOLD = 100
DECK_STRENGTH_CARDS_TO_CONSIDER = 60
DECK_STRENGTH_WEIGHTS = [1.0, 0.8, 0.4]

DECKS_2_COLOR = ["WU", "WB", "WR", "WG", "UB", "UR", "UG", "BR", "BG", "RG"]
DECKS_3_COLOR = ["WUB", "WUR", "WUG", "BRW", "GWB", "WRG", "UBR", "UBG", "RGU", "BRG"]

# Keep ordered by release
SEVENTEENLANDS_SETS = [
    "DOM", "M19", "RNA", "GRN", "WAR", "M20", "ELD", "THB", "IKO", "M21", "AKR",
    "ZNR", "KLR", "KHM", "STX", "AFR", "MID", "VOW", "NEO", "SNC", "HBG",
]
SEVENTEENLANDS_3_COLOR_SETS = ["SNC"]
CURRENT_SET_DEFAULT = "HBG"

LEAGUE_ELIMINATION_LOSSES = 11
BOMB_POOL_ID = "PSYLhA4Tit"
DUD_POOL_ID = "Ga4qDQMx6I"
TOP_COMMON_POOL_ID = "fKAvpTdSeX"

POOL_TYPE_ALIVE = "alive"
POOL_TYPE_DEAD = "dead"

FACT_BOMBS = "bombs"
FACT_DUDS = "duds"
FACT_TOP_COMMONS = "topcommons"
FACT_WHITE = "white"
FACT_BLUE = "blue"
FACT_BLACK = "black"
FACT_RED = "red"
FACT_GREEN = "green"
FACT_GOLD = "gold"
FACT_COLOURLESS = "colourless"
FACT_CMC = "cmc"
FACT_NON_BASIC_LAND = "nonbasicland"
FACT_COMMANDERS = "commanders"
FACT_PLAYSETS = "playsets"
FACT_UNIQUE_CARDS = "uniqueCards"
FACT_COST_USD = "costUSD"
FACT_STRENGTH = "strength"

COLOR_FACTS_DICT = {
    CARD_COLOR_SYMBOL_WHITE: FACT_WHITE,
    CARD_COLOR_SYMBOL_BLUE: FACT_BLUE,
    CARD_COLOR_SYMBOL_BLACK: FACT_BLACK,
    CARD_COLOR_SYMBOL_RED: FACT_RED,
    CARD_COLOR_SYMBOL_GREEN: FACT_GREEN,
}

FACT_SHEET_FIELDS = [
    FACT_BOMBS,
    FACT_DUDS,
    FACT_TOP_COMMONS,
    FACT_WHITE,
    FACT_BLUE,
    FACT_BLACK,
    FACT_RED,
    FACT_GREEN,
    FACT_GOLD,
    FACT_COLOURLESS,
    FACT_CMC,
    FACT_NON_BASIC_LAND,
    FACT_COMMANDERS,
    FACT_PLAYSETS,
    FACT_UNIQUE_CARDS,
    FACT_COST_USD,
    FACT_STRENGTH,
]

FACT_SHEET_HEADER = [
    "Player", "Team", "IsAlive", "Record", "Bombs", "Duds", "TopCommons",
    "W", "U", "B", "R", "G", "Gold", "Colourless", "Cmc", "NonBasicLand",
    "Commanders", "Playsets", "UniqueCards", "CostUSD", "Strength",
]

CARD_LISTING_HEADER = [
    "Name", "Set", "Rarity", "ManaCost", "TypeLine", "PriceUSD", "Amount",
]

PERFORMANCE_DUMP_HEADER = ["Card", "URL", "Rarity", "Colour", "Deck", "GIH WR"]
PERFORMANCE_COLOUR_GOLD = "gold"
PERFORMANCE_COLOUR_COLOURLESS = "colourless"

REPORT_PREFIX = "ASL"

DATABASE_FOLDER_DEFAULT = os.path.join(os.getcwd(), "db")
OUTPUT_FOLDER_DEFAULT = os.path.join(os.getcwd(), "out")
PERFORMANCE_OUTPUT_FOLDER_DEFAULT = os.path.join(os.getcwd(), "out-perf")
ROSTER_FILE_DEFAULT = os.path.join(os.getcwd(), "roster.csv")
LOG_FOLDER = os.path.join(os.getcwd(), "Logs")
LOG_FILE_NAME = "poolparser.log"
CONFIG_FILE_NAME = "config.json"
