from tux_levels.level import Level
from tux_levels.sectors import GameObjectSpec, Sector
from tux_levels.statistics import Statistics
from tux_levels.utils.config import Config


def _sector(name, *kinds):
    return Sector(name=name, objects=[GameObjectSpec(kind) for kind in kinds])


def test_new_level_defaults():
    level = Level()

    assert level.filename == "" and level.name == ""
    assert level.tileset == Config.DEFAULT_TILESET
    assert level.target_time == 0.0
    assert level.sectors == []
    assert not level.stats.valid


def test_add_and_get_sector():
    level = Level()
    first = _sector("main")
    second = _sector("bonus")
    level.add_sector(first)
    level.add_sector(second)

    assert level.get_sector_count() == 2
    assert level.get_sector("bonus") is second
    assert level.get_sector("missing") is None
    assert first.level is level and second.level is level


def test_totals_and_statistics():
    level = Level()
    level.target_time = 120.0
    level.add_sector(_sector("main", "coin", "coin", "snowball", "secretarea"))
    level.add_sector(_sector("bonus", "heavycoin", "mrbomb", "rock"))

    assert level.get_total_coins() == 3
    assert level.get_total_badguys() == 2
    assert level.get_total_secrets() == 1

    stats = Statistics()
    stats.coins = 5
    stats.init(level)
    assert stats.valid
    assert stats.coins == 0
    assert stats.to_dict() == {
        "coins": (0, 3),
        "badguys": (0, 2),
        "secrets": (0, 1),
        "time": (0.0, 120.0),
    }


def test_metadata():
    level = Level()
    level.filename = "worlds/map.stwm"
    level.name = "Map"
    level.add_sector(_sector("main"))

    metadata = level.get_metadata()
    assert level.is_worldmap()
    assert metadata["worldmap"] is True
    assert metadata["sectors"] == ["main"]
    assert metadata["name"] == "Map"
