import logging
from typing import Dict, Iterable, List, Optional

from fastapi import Request

from app.core.config import Settings
from app.models import Character

logger = logging.getLogger(__name__)

SEED_CHARACTERS: List[Dict] = [
    {
        "name": "Thrall",
        "stats": {
            "Health": 8500,
            "Mana": 7200,
            "Stamina": 6800,
            "Strength": 95,
            "Agility": 85,
            "Intelligence": 75,
            "Spirit": 80,
            "Armor": 90,
        },
    },
    {
        "name": "Jaina Proudmoore",
        "stats": {
            "Health": 6200,
            "Mana": 9500,
            "Stamina": 4500,
            "Intelligence": 100,
            "Spirit": 90,
            "Critical": 85,
            "Haste": 80,
        },
    },
    {
        "name": "Sylvanas Windrunner",
        "stats": {
            "Health": 7800,
            "Mana": 6800,
            "Stamina": 7200,
            "Agility": 100,
            "Critical": 95,
            "Haste": 90,
            "Versatility": 85,
            "Mastery": 80,
        },
    },
    {
        "name": "Anduin Wrynn",
        "stats": {
            "Health": 7000,
            "Mana": 8200,
            "Stamina": 5500,
            "Intelligence": 90,
            "Spirit": 95,
            "Critical": 85,
            "Haste": 80,
            "Mastery": 75,
        },
    },
    {
        "name": "Tyrande Whisperwind",
        "stats": {
            "Health": 7500,
            "Mana": 8800,
            "Stamina": 6000,
            "Agility": 90,
            "Intelligence": 85,
            "Spirit": 95,
            "Critical": 80,
            "Haste": 85,
        },
    },
]


class CharacterNotFoundError(LookupError):
    def __init__(self, character_id: Optional[int]):
        super().__init__(f"Character {character_id} not found")
        self.character_id = character_id


class RosterStore:
    """
    Ordered in-memory roster.

    Ids are derived from the current contents (max + 1), so an id freed by a
    removal of the highest record can be handed out again.
    """

    def __init__(self, characters: Iterable[Character] = ()):
        self._characters: List[Character] = list(characters)

    def __len__(self) -> int:
        return len(self._characters)

    def list(self) -> List[Character]:
        return list(self._characters)

    def next_id(self) -> int:
        return max((c.id for c in self._characters), default=0) + 1

    def _index_of(self, character_id: Optional[int]) -> int:
        for index, character in enumerate(self._characters):
            if character.id == character_id:
                return index
        raise CharacterNotFoundError(character_id)

    def get(self, character_id: int) -> Character:
        return self._characters[self._index_of(character_id)]

    def insert(self, name: str, stats: Dict[str, int]) -> Character:
        character = Character(id=self.next_id(), name=name, stats=dict(stats))
        self._characters.append(character)
        return character

    def replace(self, character: Character) -> Character:
        index = self._index_of(character.id)
        self._characters[index] = character
        return character

    def remove(self, character_id: int) -> Character:
        index = self._index_of(character_id)
        return self._characters.pop(index)


def init_store(settings: Settings) -> RosterStore:
    """Create the roster; called during startup."""
    store = RosterStore()
    if settings.seed_roster:
        for seed in SEED_CHARACTERS:
            store.insert(seed["name"], seed["stats"])
    logger.info("Roster initialised with %d characters", len(store))
    return store


def get_store(request: Request) -> RosterStore:
    """Return the application's roster for dependency injection."""
    return request.app.state.store
