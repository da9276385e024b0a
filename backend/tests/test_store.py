import pytest

from app.analytics import average_stats, stat_distribution
from app.core.config import Settings
from app.models import Character
from app.store import SEED_CHARACTERS, CharacterNotFoundError, RosterStore, init_store


def test_insert_on_empty_store_starts_at_one():
    store = RosterStore()
    assert store.next_id() == 1
    created = store.insert("Thrall", {"Health": 8500})
    assert created == Character(id=1, name="Thrall", stats={"Health": 8500})


def test_insert_uses_max_id_plus_one():
    store = RosterStore([Character(id=4, name="A"), Character(id=2, name="B")])
    assert store.insert("C", {}).id == 5


def test_insert_copies_stats():
    stats = {"Mana": 10}
    created = RosterStore().insert("Jaina", stats)
    stats["Mana"] = 0
    assert created.stats == {"Mana": 10}


def test_replace_and_remove_unknown_raise():
    store = RosterStore([Character(id=1, name="A")])
    with pytest.raises(CharacterNotFoundError):
        store.replace(Character(id=2, name="B"))
    with pytest.raises(CharacterNotFoundError):
        store.remove(2)
    assert store.list() == [Character(id=1, name="A")]


def test_replace_keeps_position():
    store = RosterStore([Character(id=1, name="A"), Character(id=2, name="B"), Character(id=3, name="C")])
    store.replace(Character(id=2, name="B2", stats={"Haste": 80}))
    assert [c.name for c in store.list()] == ["A", "B2", "C"]


def test_list_returns_copy():
    store = RosterStore([Character(id=1, name="A")])
    store.list().clear()
    assert len(store) == 1


def test_init_store_seeds_roster(monkeypatch):
    monkeypatch.setenv("SEED_ROSTER", "true")
    store = init_store(Settings())
    assert [c.id for c in store.list()] == [1, 2, 3, 4, 5]
    assert store.get(1).name == SEED_CHARACTERS[0]["name"]

    monkeypatch.setenv("SEED_ROSTER", "off")
    assert len(init_store(Settings())) == 0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GENERATION_INTERVAL_SECONDS", "0.5")
    monkeypatch.setenv("GENERATION_MIN_ROSTER_SIZE", "8")
    monkeypatch.setenv("GENERATOR_SEED", "17")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,http://a.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()
    assert settings.generation_interval_seconds == 0.5
    assert settings.generation_min_roster_size == 8
    assert settings.generator_seed == 17
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_average_stats_rounds_half_up():
    characters = [Character(id=1, name="A", stats={"Spirit": 1}), Character(id=2, name="B", stats={"Spirit": 2})]
    assert average_stats(characters) == [("Spirit", 2)]
    assert average_stats([]) == []


def test_stat_distribution_buckets_totals():
    characters = [
        Character(id=1, name="A", stats={"Health": 999}),
        Character(id=2, name="B", stats={"Health": 1000}),
        Character(id=3, name="C", stats={"Health": 1500, "Mana": 499}),
    ]
    assert stat_distribution(characters) == [("0-999", 1), ("1000-1999", 2)]
