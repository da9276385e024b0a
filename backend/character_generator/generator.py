import random
from dataclasses import dataclass, field
from typing import Dict, List

STAT_TYPES = (
    "Health",
    "Mana",
    "Stamina",
    "Strength",
    "Agility",
    "Intelligence",
    "Spirit",
    "Armor",
    "Critical",
    "Haste",
    "Mastery",
    "Versatility",
)

# Pools get the high value range; everything else is a rating.
PRIMARY_STATS = frozenset({"Health", "Mana", "Stamina"})
PRIMARY_RANGE = (5000, 10000)
SECONDARY_RANGE = (50, 100)

MIN_STATS = 5
MAX_STATS = 8

CHARACTER_CLASSES = (
    "Warrior",
    "Paladin",
    "Hunter",
    "Rogue",
    "Priest",
    "Death Knight",
    "Shaman",
    "Mage",
    "Warlock",
    "Monk",
    "Druid",
    "Demon Hunter",
)

FIRST_NAMES = (
    "Aldric", "Brenna", "Cedric", "Daria", "Eldon", "Fiora", "Garrick", "Helena",
    "Ivor", "Jorunn", "Kael", "Liora", "Magnus", "Nerys", "Orin", "Petra",
    "Quentin", "Rowena", "Soren", "Talia", "Ulric", "Vesna", "Wystan", "Yselda",
)

LAST_NAMES = (
    "Ashford", "Blackwood", "Crowley", "Dawnbreaker", "Emberfall", "Frostmane",
    "Greymoor", "Hollowell", "Ironside", "Kingsley", "Lightbringer", "Moonwhisper",
    "Northgate", "Oakheart", "Proudmore", "Ravencrest", "Stormrage", "Thornwood",
    "Underhill", "Valeborn", "Windrider", "Wolfsbane",
)


@dataclass
class GeneratedCharacter:
    id: int
    name: str
    stats: Dict[str, int] = field(default_factory=dict)


def _roll_stat(stat: str, rng: random.Random) -> int:
    low, high = PRIMARY_RANGE if stat in PRIMARY_STATS else SECONDARY_RANGE
    return rng.randint(low, high)


def generate_character(id: int, rng: random.Random) -> GeneratedCharacter:
    """
    Build a random character for the given id.

    - Name is "<first> <last> the <class>".
    - 5 to 8 distinct stats; Health/Mana/Stamina roll 5000-10000, the rest 50-100.

    All randomness comes from `rng`, so a seeded generator gives repeatable output.
    """
    full_name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
    character_class = rng.choice(CHARACTER_CLASSES)

    count = rng.randint(MIN_STATS, MAX_STATS)
    selected = rng.sample(STAT_TYPES, count)
    stats = {stat: _roll_stat(stat, rng) for stat in selected}

    return GeneratedCharacter(id=id, name=f"{full_name} the {character_class}", stats=stats)


def generate_characters(count: int, start_id: int, rng: random.Random) -> List[GeneratedCharacter]:
    """Generate `count` characters with consecutive ids beginning at `start_id`."""
    return [generate_character(start_id + offset, rng) for offset in range(count)]
