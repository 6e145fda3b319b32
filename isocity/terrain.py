"""Terrain generation settings and biome data."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .settings import ConfigurationError


def _ids(key: str) -> Any:
    return field(default_factory=list, metadata={"json": key})


@dataclass
class BiomeData:
    """Tile IDs available in one biome, grouped by purpose."""

    terrain: list[str] = _ids("terrain")
    water: list[str] = _ids("water")
    water_decoration: list[str] = _ids("waterDecoration")
    water_flora_light: list[str] = _ids("waterFloraLight")
    water_flora_medium: list[str] = _ids("waterFloraMedium")
    water_flora_dense: list[str] = _ids("waterFloraDense")
    terrain_rocks: list[str] = _ids("terrainRocks")
    terrain_decoration: list[str] = _ids("terrainDecoration")
    terrain_flora_light: list[str] = _ids("terrainFloraLight")
    terrain_flora_medium: list[str] = _ids("terrainFloraMedium")
    terrain_flora_dense: list[str] = _ids("terrainFloraDense")
    bushes_light: list[str] = _ids("bushesLight")
    bushes_medium: list[str] = _ids("bushesMedium")
    bushes_dense: list[str] = _ids("bushesDense")
    trees_light: list[str] = _ids("treesLight")
    trees_medium: list[str] = _ids("treesMedium")
    trees_dense: list[str] = _ids("treesDense")

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BiomeData:
        """Read a biome object; missing lists are left empty."""
        if not isinstance(data, dict):
            raise ConfigurationError("Biome data must be a JSON object")
        values = {}
        for f in fields(cls):
            key = f.metadata["json"]
            if key not in data:
                continue
            ids = data[key]
            if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
                raise ConfigurationError(f"Biome entry {key!r} must be a list of tile IDs")
            values[f.name] = list(ids)
        return cls(**values)


@dataclass
class TerrainSettings:
    """Parameters of the terrain generator."""

    map_size: int = 128
    seed: int = 0  # 0 picks a random seed
    sea_level: int = 3
    max_height: int = 32
    tree_density: int = 50
    mountain_amplitude: int = 10
    water_amount: int = 5
    coasts: int = 1
    rivers: int = 1
    biomes: str = "{}"
    advanced: str = "{}"


def load_biome_data(path: str | Path) -> dict[str, BiomeData]:
    """Load every biome from a terrain generation data file.

    Raises ConfigurationError if the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not read JSON File {path}") from exc
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise ConfigurationError(f"Error parsing JSON File {path}") from exc
    if not isinstance(document, dict):
        raise ConfigurationError(f"Error parsing JSON File {path}")
    return {name: BiomeData.from_json(value) for name, value in document.items()}