"""
tests/payloads.py
Canned responses from the remote sources.
"""

import json

LIGHTNING_BOLT = {
    "object": "card",
    "name": "Lightning Bolt",
    "mana_cost": "{R}",
    "cmc": 1.0,
    "type_line": "Instant",
    "colors": ["R"],
    "color_identity": ["R"],
    "set": "sta",
    "set_name": "Strixhaven Mystical Archive",
    "rarity": "uncommon",
    "prices": {"usd": "1.49", "usd_foil": None, "eur": "1.10", "tix": "0.02"},
}

PLAINS = {
    "object": "card",
    "name": "Plains",
    "mana_cost": "",
    "cmc": 0.0,
    "type_line": "Basic Land â€” Plains",
    "colors": [],
    "color_identity": ["W"],
    "set": "hbg",
    "rarity": "common",
    "prices": {"usd": "0.10"},
}

DELVER = {
    "object": "card",
    "name": "Delver of Secrets // Insectile Aberration",
    "cmc": 1.0,
    "type_line": "Creature â€” Human Wizard // Creature â€” Human Insect",
    "color_identity": ["U"],
    "set": "mid",
    "rarity": "uncommon",
    "card_faces": [
        {"name": "Delver of Secrets", "mana_cost": "{U}", "type_line": "Creature â€” Human Wizard"},
        {"name": "Insectile Aberration", "mana_cost": "", "type_line": "Creature â€” Human Insect"},
    ],
    "prices": {"usd": None},
}

SEALED_DECK = {
    "poolId": "abc123",
    "deck": [
        {"name": "Lightning Bolt", "count": 1},
        {"name": "Plains", "count": 2},
    ],
    "sideboard": [
        {"name": "Plains", "count": 2},
    ],
}


def performance_record(name, rarity="common", ever_drawn_game_count=1000, ever_drawn_win_rate=0.6, color="R"):
    return {
        "name": name,
        "color": color,
        "rarity": rarity,
        "url": f"https://cards.scryfall.io/large/front/{name}.jpg",
        "url_back": None,
        "seen_count": 5000,
        "avg_seen": 3.2,
        "game_count": 4000,
        "win_rate": 0.55,
        "ever_drawn_game_count": ever_drawn_game_count,
        "ever_drawn_win_rate": ever_drawn_win_rate,
    }


def to_payload(data) -> bytes:
    return json.dumps(data).encode("utf-8")
