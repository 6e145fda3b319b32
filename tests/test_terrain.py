import json

import pytest

from isocity.settings import ConfigurationError
from isocity.terrain import BiomeData, TerrainSettings, load_biome_data


def test_biome_from_json_maps_keys():
    biome = BiomeData.from_json(
        {"terrain": ["grass"], "water": ["water"], "treesDense": ["oak", "pine"]}
    )
    assert biome.terrain == ["grass"]
    assert biome.water == ["water"]
    assert biome.trees_dense == ["oak", "pine"]


def test_biome_missing_keys_are_empty():
    biome = BiomeData.from_json({"terrain": ["grass"]})
    assert biome.trees_light == []
    assert biome.water_decoration == []


def test_biome_rejects_non_list():
    with pytest.raises(ConfigurationError):
        BiomeData.from_json({"terrain": "grass"})


def test_biome_rejects_non_object():
    with pytest.raises(ConfigurationError):
        BiomeData.from_json(["grass"])


def test_biome_instances_do_not_share_lists():
    first = BiomeData()
    second = BiomeData()
    first.terrain.append("grass")
    assert second.terrain == []


def test_terrain_settings_overrides():
    settings = TerrainSettings(seed=42, map_size=64)
    assert (settings.seed, settings.map_size) == (42, 64)
    assert settings.sea_level == TerrainSettings().sea_level


def test_load_biome_data(tmp_path):
    path = tmp_path / "TerrainGen.json"
    path.write_text(
        json.dumps(
            {
                "GrassLands": {"terrain": ["terrain_grass"], "treesLight": ["tree"]},
                "Desert": {"terrain": ["terrain_sand"]},
            }
        )
    )
    biomes = load_biome_data(path)
    assert set(biomes) == {"GrassLands", "Desert"}
    assert biomes["GrassLands"].trees_light == ["tree"]
    assert biomes["Desert"].terrain == ["terrain_sand"]


def test_load_biome_data_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_biome_data(path)


def test_load_biome_data_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_biome_data(tmp_path / "missing.json")


def test_load_biome_data_not_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]")
    with pytest.raises(ConfigurationError):
        load_biome_data(path)